from .object import (
    Property,
    PropertySpec,
    CheckerRecord,
    as_property,
    deprecated,
    dispatch,
    having,
    object_,
    opt,
    per_node,
    pick,
    record,
    when,
)
from .simple import (
    any_,
    any_of,
    boolean,
    float_range,
    int_range,
    list_of,
    literal,
    number,
    ref,
    string,
)

__all__ = [
    'Property', 'PropertySpec', 'CheckerRecord', 'as_property',
    'deprecated', 'dispatch', 'having', 'object_', 'opt', 'per_node', 'pick', 'record', 'when',
    'any_', 'any_of', 'boolean', 'float_range', 'int_range', 'list_of', 'literal', 'number', 'ref', 'string',
]
