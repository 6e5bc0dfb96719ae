"""Async utilities: AsyncOption, async combinators and iteration helpers.

The combinators live in `klaw_option.async_.ops` and share names with
`klaw_option.ops`; import the module rather than the names:

    from klaw_option.async_ import ops as aops

    await aops.omap(fetch_user(1), format_user)
"""

from klaw_option.async_ import ops
from klaw_option.async_.itertools import (
    async_choose,
    async_first_or_nothing,
    async_sequence,
)
from klaw_option.async_.ops import MaybeAwaitable, resolve
from klaw_option.async_.option import AsyncOption

__all__ = [
    'AsyncOption',
    'MaybeAwaitable',
    'async_choose',
    'async_first_or_nothing',
    'async_sequence',
    'ops',
    'resolve',
]
