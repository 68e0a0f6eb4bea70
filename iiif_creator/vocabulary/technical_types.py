from enum import Enum


class Behaviors(str, Enum):
    AUTO_ADVANCE = 'auto-advance'
    CONTINUOUS = 'continuous'
    FACING_PAGES = 'facing-pages'
    HIDDEN = 'hidden'
    INDIVIDUALS = 'individuals'
    MULTI_PART = 'multi-part'
    NO_AUTO_ADVANCE = 'no-auto-advance'
    NO_NAV = 'no-nav'
    NO_REPEAT = 'no-repeat'
    NON_PAGED = 'non-paged'
    PAGED = 'paged'
    REPEAT = 'repeat'
    SEQUENCE = 'sequence'
    THUMBNAIL_NAV = 'thumbnail-nav'
    TOGETHER = 'together'
    UNORDERED = 'unordered'

    def __str__(self) -> str:
        return self.value


class ViewingDirection(str, Enum):
    LEFT_TO_RIGHT = 'left-to-right'
    RIGHT_TO_LEFT = 'right-to-left'
    TOP_TO_BOTTOM = 'top-to-bottom'
    BOTTOM_TO_TOP = 'bottom-to-top'

    def __str__(self) -> str:
        return self.value


class ViewMode(Enum):
    """
    How a resource renders itself, decided by where its parent embeds it.

    * ``FULL``: every set property
    * ``MEMBER_ONLY``: ``id``, ``type``, ``label`` and a few class-specific extras
    * ``ID_ONLY``: the bare ``id`` string
    """
    FULL = 'full'
    MEMBER_ONLY = 'member-only'
    ID_ONLY = 'id-only'
