# portal/colors.py
"""
Color tokens for dashboard cards.

Notice cards pick a color from a fixed palette by hashing the notice id, so
the same notice always renders with the same color on every page and in every
process. Subjects use a larger palette indexed by a persisted color index
(see academics.services.subject_colors).
"""

NOTICE_CARD_COLORS = (
    "bg-blue-100 border-l-4 border-blue-500",
    "bg-purple-100 border-l-4 border-purple-500",
    "bg-pink-100 border-l-4 border-pink-500",
    "bg-green-100 border-l-4 border-green-500",
    "bg-yellow-100 border-l-4 border-yellow-500",
    "bg-orange-100 border-l-4 border-orange-500",
    "bg-teal-100 border-l-4 border-teal-500",
    "bg-indigo-100 border-l-4 border-indigo-500",
    "bg-cyan-100 border-l-4 border-cyan-500",
    "bg-rose-100 border-l-4 border-rose-500",
    "bg-emerald-100 border-l-4 border-emerald-500",
    "bg-violet-100 border-l-4 border-violet-500",
)

SUBJECT_COLORS = tuple(
    f"bg-{c}-100 border-l-4 border-{c}-400 text-{c}-900"
    for c in (
        "blue", "purple", "green", "yellow", "pink",
        "cyan", "orange", "red", "indigo", "teal",
        "lime", "amber", "emerald", "violet", "fuchsia",
        "rose", "sky", "slate", "zinc", "stone",
    )
)

DEFAULT_SUBJECT_COLOR = "bg-gray-100 border-l-4 border-gray-400 text-gray-900"

INT32_MIN = -(2 ** 31)
_MASK32 = 0xFFFFFFFF


def to_int32(value: int) -> int:
    """Reinterpret ``value`` as a 32-bit two's-complement signed integer."""
    value &= _MASK32
    if value & 0x80000000:
        return value - 0x100000000
    return value


def _code_units(identifier: str):
    # UTF-16 code units, so astral characters hash as their surrogate pair
    data = identifier.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def hash_identifier(identifier: str) -> int:
    """
    Fold ``hash = hash * 31 + code`` over the identifier, wrapping to a
    signed 32-bit integer after every step. The empty string hashes to 0.
    """
    h = 0
    for code in _code_units(identifier):
        h = to_int32((h << 5) - h + code)
    return h


def index_for_hash(value: int, size: int = len(NOTICE_CARD_COLORS)) -> int:
    """
    Map a 32-bit hash onto ``[0, size)``.

    ``abs()`` is taken on an unbounded int, so INT32_MIN becomes 2**31 rather
    than overflowing (index 8 for the 12-color palette).
    """
    return abs(value) % size


def palette_index(identifier: str, size: int = len(NOTICE_CARD_COLORS)) -> int:
    return index_for_hash(hash_identifier(identifier), size)


def notice_card_color(identifier: str) -> str:
    """Card classes for a notice, keyed by its id."""
    return NOTICE_CARD_COLORS[palette_index(identifier)]


def subject_color(color_index) -> str:
    """Classes for a registry color index; gray when the subject has none yet."""
    if color_index is None:
        return DEFAULT_SUBJECT_COLOR
    # wraps once the registry outgrows the palette
    return SUBJECT_COLORS[color_index % len(SUBJECT_COLORS)]
