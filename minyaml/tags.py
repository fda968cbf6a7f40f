"""YAML 1.1 core schema tags."""

TAG_PREFIX = 'tag:yaml.org,2002:'

MAP_TAG = TAG_PREFIX + 'map'
SET_TAG = TAG_PREFIX + 'set'
SEQ_TAG = TAG_PREFIX + 'seq'
PAIRS_TAG = TAG_PREFIX + 'pairs'

NULL_TAG = TAG_PREFIX + 'null'
BOOL_TAG = TAG_PREFIX + 'bool'
TRUE_TAG = TAG_PREFIX + 'true'
FALSE_TAG = TAG_PREFIX + 'false'
INT_TAG = TAG_PREFIX + 'int'
FLOAT_TAG = TAG_PREFIX + 'float'
STR_TAG = TAG_PREFIX + 'str'
TIMESTAMP_TAG = TAG_PREFIX + 'timestamp'
BINARY_TAG = TAG_PREFIX + 'binary'

# Non-specific tag ("!") as reported by PyYAML
NON_SPECIFIC_TAG = '!'
