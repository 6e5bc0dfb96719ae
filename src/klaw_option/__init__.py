"""klaw-option: Type-safe Option type for Python 3.13+.

An Option is either Some(value) or Nothing. Combinators are available as
methods on both variants, as free functions in `klaw_option.ops`, and as
async-aware coroutines in `klaw_option.async_.ops`.

Flat imports (preferred):
    from klaw_option import Option, Some, Nothing, of_obj
    from klaw_option import AsyncOption, optional, first_or_nothing

Submodule imports (for organization):
    from klaw_option import ops
    from klaw_option.async_ import ops as aops
"""

# Free functions
from klaw_option import ops

# Config
from klaw_option._config import OptionConfig, get_config, init

# Async
from klaw_option.async_ import (
    AsyncOption,
    async_choose,
    async_first_or_nothing,
    async_sequence,
)

# Decorators
from klaw_option.decorators import optional, optional_async
from klaw_option.errors import NothingError

# Iteration helpers
from klaw_option.itertools import choose, first_or_nothing, sequence

# Types
from klaw_option.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    nothing,
    of_nullable,
    of_obj,
    some,
)

__all__ = [
    # Async
    'AsyncOption',
    # Option types
    'Nothing',
    # Errors
    'NothingError',
    'NothingType',
    'Option',
    # Config
    'OptionConfig',
    'Some',
    'async_choose',
    'async_first_or_nothing',
    'async_sequence',
    # Iteration helpers
    'choose',
    'first_or_nothing',
    'get_config',
    'init',
    'nothing',
    'of_nullable',
    'of_obj',
    # Free functions
    'ops',
    # Decorators
    'optional',
    'optional_async',
    'sequence',
    'some',
]
