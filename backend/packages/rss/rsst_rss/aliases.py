"""Tag-name alias sets shared by RSS 2.0 and Atom documents."""

ENTRY_KEYS = ("entry", "item")
DATE_KEYS = ("published", "updated", "pubDate", "date")
CONTENT_KEYS = ("content", "description")
TITLE_KEYS = ("title",)
LINK_KEYS = ("link",)
ENCLOSURE_KEYS = ("enclosure",)

OUTLINE_KEYS = ("outline",)
