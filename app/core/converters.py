"""
URL path converters.

PageIndexConverter accepts signed integers so that a negative page index
reaches the view (and yields an empty page) instead of failing URL routing.
Registered as "page_index" in config.urls.
"""


class PageIndexConverter:
    regex = "-?[0-9]+"

    def to_python(self, value: str) -> int:
        return int(value)

    def to_url(self, value: int) -> str:
        return str(value)
