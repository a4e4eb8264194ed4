"""
Pronunciation Variants

Known speech-to-text mis-hearings, synonyms and abbreviation expansions for
technical and behavioral interview vocabulary.
"""

from types import MappingProxyType
from typing import List, Mapping, Tuple

PRONUNCIATION_VARIANTS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    # APIs and data stores
    'api': ('a p i', 'apa', 'apy', 'apis'),
    'sql': ('sequel', 's q l'),
    'nosql': ('no sequel', 'no sql', 'nosql'),
    'graphql': ('graph ql', 'graph', 'graphical'),
    'rest': ('restful', 'rest api', 'representational'),
    'redis': ('red is', 'redus', 'cache'),
    'mongodb': ('mongo', 'mongo db', 'document database'),
    'postgresql': ('postgres', 'post gres', 'postgre'),
    'mysql': ('my sequel', 'my sql', 'maria'),
    # Cloud and containers
    'aws': ('a w s', 'amazon web services', 'amazon'),
    'gcp': ('g c p', 'google cloud', 'google'),
    'azure': ('asure', 'azur', 'microsoft azure'),
    'kubernetes': ('k8s', 'kube', 'kuber', 'kubernete', 'kubernetes'),
    'docker': ('dokker', 'dockr', 'containers'),
    'container': ('containers', 'containerized', 'containerization'),
    'serverless': ('server less', 'lambda', 'functions'),
    'lambda': ('lamba', 'function', 'serverless'),
    'ec2': ('e c 2', 'ec two', 'instance', 'virtual machine'),
    's3': ('s 3', 's three', 'bucket', 'storage'),
    'cdn': ('c d n', 'content delivery', 'cloudfront'),
    # Delivery
    'ci/cd': ('ci cd', 'cicd', 'continuous integration', 'continuous deployment'),
    'terraform': ('terra form', 'infrastructure as code', 'iac'),
    'ansible': ('ansible', 'configuration management'),
    'pipeline': ('pipe line', 'workflow', 'build'),
    'deployment': ('deploy', 'release', 'ship'),
    # Security
    'jwt': ('j w t', 'json web token', 'token'),
    'oauth': ('o auth', 'o off', 'authentication'),
    'authentication': ('auth', 'login', 'sign in'),
    'authorization': ('authz', 'permissions', 'access control'),
    # Architecture
    'microservice': ('micro service', 'microservices', 'micro'),
    'monolith': ('monolithic', 'mono', 'single service'),
    'load balancer': ('load balance', 'balancer', 'lb', 'nginx'),
    'queue': ('q', 'message queue', 'messaging'),
    'kafka': ('cafka', 'kafca', 'message queue'),
    'pub/sub': ('pub sub', 'publish subscribe', 'pubsub'),
    'event-driven': ('event driven', 'events', 'reactive'),
    'circuit breaker': ('circuit break', 'breaker', 'fallback'),
    'cqrs': ('c q r s', 'command query', 'separation'),
    'saga': ('sagas', 'distributed transaction'),
    # Reliability
    'scalability': ('scale', 'scaling', 'scalable'),
    'availability': ('available', 'uptime', 'high availability'),
    'reliability': ('reliable', 'dependable'),
    'latency': ('delay', 'response time', 'lag'),
    'throughput': ('through put', 'bandwidth', 'capacity'),
    'monitoring': ('monitor', 'observability', 'metrics'),
    'logging': ('logs', 'log', 'audit'),
    # Behavioral
    'stakeholder': ('stake holder', 'stakeholders', 'business'),
    'collaboration': ('collaborate', 'teamwork', 'working together'),
    'communication': ('communicate', 'talking', 'discussion'),
    'leadership': ('leader', 'leading', 'manage'),
    'prioritize': ('priority', 'priorities', 'prioritization'),
    'deadline': ('deadlines', 'timeline', 'due date'),
    'conflict': ('conflicts', 'disagreement', 'issue'),
    'resolution': ('resolve', 'solving', 'solution'),
    'feedback': ('feed back', 'review', 'input'),
})


def get_pronunciation_variations(term: str) -> List[str]:
    """
    Return every spelling of ``term`` that should count as a mention.

    The list starts with the term itself, followed by table entries, a
    plural/singular form and, for ``-ing``/``-tion`` words, stem forms.
    """
    variations = [term]
    lower = term.lower()

    variations.extend(PRONUNCIATION_VARIANTS.get(lower, ()))

    # Plural/singular
    if lower.endswith('s'):
        variations.append(lower[:-1])
    else:
        variations.append(lower + 's')

    # Suffix stems
    if lower.endswith('ing'):
        variations.append(lower[:-3])
        variations.append(lower[:-3] + 'e')
    if lower.endswith('tion'):
        variations.append(lower[:-4] + 'te')

    return variations
