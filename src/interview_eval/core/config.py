"""
Configuration Management

Centralized configuration management with YAML file support
and environment variable overrides.
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any, List
from dataclasses import dataclass, field
import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load .env file if it exists
load_dotenv()


@dataclass
class VerdictThresholdsConfig:
    """Minimum (keyword percent, score) pair required for each verdict tier."""
    strong_hire: List[float] = field(default_factory=lambda: [70.0, 70.0])
    hire: List[float] = field(default_factory=lambda: [50.0, 55.0])
    lean_hire: List[float] = field(default_factory=lambda: [35.0, 40.0])
    lean_no_hire: List[float] = field(default_factory=lambda: [20.0, 25.0])


@dataclass
class ShortAnswerPenaltyConfig:
    """Multiplicative dampener applied below fixed word counts."""
    bands: List[List[float]] = field(default_factory=lambda: [
        [10, 0.2],
        [20, 0.5],
        [30, 0.8],
    ])


@dataclass
class EvaluationConfig:
    """Weights and thresholds for spoken answer scoring."""
    keyword_weight: float = 60.0
    overlap_weight: float = 20.0
    length_weight: float = 20.0
    # Fraction of the reference vocabulary that must reappear for full overlap credit
    overlap_fraction: float = 0.2
    substantial_answer_words: int = 40
    min_token_length: int = 3
    display_limit: int = 5
    max_improvements: int = 4
    short_answer_penalty: ShortAnswerPenaltyConfig = field(default_factory=ShortAnswerPenaltyConfig)
    verdicts: VerdictThresholdsConfig = field(default_factory=VerdictThresholdsConfig)


@dataclass
class SourceCheckConfig:
    """Source URL liveness check settings."""
    enabled: bool = True
    timeout: float = 5.0
    retries: int = 1
    retry_delay: float = 0.5
    max_concurrent: int = 8
    user_agent: str = "Mozilla/5.0 (compatible; BlogBot/1.0)"


@dataclass
class QualityGateConfig:
    """Blog quality gate thresholds."""
    min_sections: int = 3
    max_sections: int = 8
    min_section_length: int = 150
    max_section_length: int = 2000
    min_intro_length: int = 100
    max_intro_length: int = 600
    min_conclusion_length: int = 100
    max_conclusion_length: int = 500

    min_sources: int = 8
    min_valid_source_percentage: float = 0.85

    min_inline_citations: int = 5
    citation_density: float = 0.002

    max_avg_sentence_length: float = 25.0
    min_avg_sentence_length: float = 10.0
    long_sentence_words: int = 30
    max_consecutive_long_sentences: int = 3

    min_transition_words: int = 5
    min_keyword_density: float = 0.01
    max_keyword_density: float = 0.05

    min_overall_score: float = 70.0
    min_coherence_score: float = 60.0
    min_readability_score: float = 60.0
    min_technical_score: float = 70.0

    sources: SourceCheckConfig = field(default_factory=SourceCheckConfig)


@dataclass
class PracticeConfig:
    """Voice practice session settings."""
    session_size: int = 10
    fallback_channels: List[str] = field(default_factory=lambda: [
        "behavioral", "system-design", "sre", "devops"
    ])
    min_answer_length: int = 100


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    console_level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str = "logs/interview_eval.log"
    max_size: str = "10MB"
    backup_count: int = 5
    json: bool = False


@dataclass
class AppConfig:
    """Main application configuration."""
    name: str = "Interview Eval"
    version: str = "1.0.0"
    environment: str = "production"
    debug: bool = False

    evaluation: EvaluationConfig = field(default_factory=EvaluationConfig)
    quality_gate: QualityGateConfig = field(default_factory=QualityGateConfig)
    practice: PracticeConfig = field(default_factory=PracticeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, config_path: Path) -> "AppConfig":
        """Load configuration from YAML file."""
        try:
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}")

        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> "AppConfig":
        """Build configuration from a nested dictionary."""
        config_data = cls._apply_env_overrides(dict(config_data))

        # Handle nested app configuration structure
        if 'app' in config_data:
            app_config = config_data.pop('app')
            config_data.update(app_config)

        try:
            if 'evaluation' in config_data and isinstance(config_data['evaluation'], dict):
                eval_data = config_data['evaluation']
                if 'short_answer_penalty' in eval_data and isinstance(eval_data['short_answer_penalty'], dict):
                    eval_data['short_answer_penalty'] = ShortAnswerPenaltyConfig(**eval_data['short_answer_penalty'])
                if 'verdicts' in eval_data and isinstance(eval_data['verdicts'], dict):
                    eval_data['verdicts'] = VerdictThresholdsConfig(**eval_data['verdicts'])
                config_data['evaluation'] = EvaluationConfig(**eval_data)

            if 'quality_gate' in config_data and isinstance(config_data['quality_gate'], dict):
                gate_data = config_data['quality_gate']
                if 'sources' in gate_data and isinstance(gate_data['sources'], dict):
                    gate_data['sources'] = SourceCheckConfig(**gate_data['sources'])
                config_data['quality_gate'] = QualityGateConfig(**gate_data)

            if 'practice' in config_data and isinstance(config_data['practice'], dict):
                config_data['practice'] = PracticeConfig(**config_data['practice'])

            if 'logging' in config_data and isinstance(config_data['logging'], dict):
                config_data['logging'] = LoggingConfig(**config_data['logging'])

            if isinstance(config_data.get('debug'), str):
                config_data['debug'] = config_data['debug'].lower() in ('1', 'true', 'yes')

            return cls(**config_data)
        except TypeError as e:
            raise ConfigurationError(f"Unknown configuration key: {e}")

    @staticmethod
    def _apply_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        env_mappings = {
            'LOG_LEVEL': ['logging', 'level'],
            'DEBUG': ['debug'],
            'ENVIRONMENT': ['environment'],
            'SOURCE_CHECK_TIMEOUT': ['quality_gate', 'sources', 'timeout'],
        }

        for env_var, config_path in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value:
                current = config_data
                for key in config_path[:-1]:
                    current = current.setdefault(key, {})
                current[config_path[-1]] = env_value

        sources = config_data.get('quality_gate', {}).get('sources', {})
        if isinstance(sources, dict) and isinstance(sources.get('timeout'), str):
            try:
                sources['timeout'] = float(sources['timeout'])
            except ValueError:
                raise ConfigurationError(
                    f"SOURCE_CHECK_TIMEOUT must be a number, got {sources['timeout']!r}"
                )

        return config_data


def validate_config(config: AppConfig) -> List[str]:
    """Return a list of problems with the configuration (empty when valid)."""
    errors = []
    evaluation = config.evaluation

    weights = evaluation.keyword_weight + evaluation.overlap_weight + evaluation.length_weight
    if abs(weights - 100.0) > 1e-6:
        errors.append(f"evaluation weights must sum to 100, got {weights:g}")
    if not 0 < evaluation.overlap_fraction <= 1:
        errors.append("evaluation.overlap_fraction must be in (0, 1]")
    if evaluation.substantial_answer_words <= 0:
        errors.append("evaluation.substantial_answer_words must be positive")

    previous_limit = 0
    for band in evaluation.short_answer_penalty.bands:
        if len(band) != 2:
            errors.append(f"short answer penalty band must be [words, factor], got {band}")
            continue
        limit, factor = band
        if limit <= previous_limit:
            errors.append("short answer penalty bands must have increasing word limits")
        if not 0 <= factor <= 1:
            errors.append(f"short answer penalty factor out of range: {factor}")
        previous_limit = limit

    tiers = [
        ('strong_hire', evaluation.verdicts.strong_hire),
        ('hire', evaluation.verdicts.hire),
        ('lean_hire', evaluation.verdicts.lean_hire),
        ('lean_no_hire', evaluation.verdicts.lean_no_hire),
    ]
    for (name, pair), (next_name, next_pair) in zip(tiers, tiers[1:]):
        if pair[0] < next_pair[0] or pair[1] < next_pair[1]:
            errors.append(f"verdict thresholds for {name} must not be below {next_name}")

    gate = config.quality_gate
    if gate.min_sections > gate.max_sections:
        errors.append("quality_gate.min_sections exceeds max_sections")
    if not 0 <= gate.min_valid_source_percentage <= 1:
        errors.append("quality_gate.min_valid_source_percentage must be in [0, 1]")
    if gate.sources.timeout <= 0:
        errors.append("quality_gate.sources.timeout must be positive")
    if gate.sources.max_concurrent <= 0:
        errors.append("quality_gate.sources.max_concurrent must be positive")

    if config.logging.level.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        errors.append(f"logging.level is not a valid level: {config.logging.level}")

    return errors


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config(config_path: Optional[Path] = None) -> AppConfig:
    """Get the application configuration instance."""
    global _config

    if _config is None:
        if config_path is None:
            # Default configuration path
            config_path = Path("config/default.yaml")

        if config_path.exists():
            _config = AppConfig.from_yaml(config_path)
        else:
            # Use default configuration if file doesn't exist
            _config = AppConfig()

    return _config


def set_config(config: AppConfig) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config


def reload_config(config_path: Optional[Path] = None) -> AppConfig:
    """Reload configuration from file."""
    global _config
    _config = None
    return get_config(config_path)
