"""Structural queries over fetched HTML."""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag


@dataclass(frozen=True, kw_only=True)
class PageStructure:
    """Elements of interest extracted from a page."""

    title: str | None = None
    element_ids: frozenset[str] = frozenset()
    scripts: Sequence[str] = ()
    stylesheets: Sequence[str] = ()
    images: Sequence[str] = ()
    noscript_text: str = ""

    def has_id(self, element_id: str) -> bool:
        return element_id in self.element_ids


@dataclass(frozen=True, kw_only=True)
class SelectorMatch:
    """Result of a CSS selector query against a page."""

    selector: str
    count: int
    text: str

    @property
    def found(self) -> bool:
        return self.count > 0


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _attribute_values(tags: Iterable[Tag], attribute: str) -> tuple[str, ...]:
    return tuple(value for tag in tags if (value := tag.get(attribute)))


def _is_stylesheet(tag: Tag) -> bool:
    # rel keywords are case-insensitive
    return "stylesheet" in (value.lower() for value in tag.get("rel") or ())


def parse_page(html: str) -> PageStructure:
    """Extract title, ids, assets and noscript text from ``html``."""
    soup = parse_document(html)

    return PageStructure(
        title=soup.title.get_text(strip=True) if soup.title is not None else None,
        element_ids=frozenset(tag["id"] for tag in soup.find_all(id=True)),
        scripts=_attribute_values(soup.find_all("script", src=True), "src"),
        stylesheets=_attribute_values(
            (tag for tag in soup.find_all("link", href=True) if _is_stylesheet(tag)),
            "href",
        ),
        images=_attribute_values(soup.find_all("img", src=True), "src"),
        noscript_text="".join(tag.get_text() for tag in soup.find_all("noscript")),
    )


def query_selectors(
    html: str, selectors: Iterable[str]
) -> Mapping[str, SelectorMatch]:
    """Run each CSS selector against ``html``, reporting count and first text."""
    soup = parse_document(html)

    matches: dict[str, SelectorMatch] = {}
    for selector in selectors:
        elements = soup.select(selector)
        matches[selector] = SelectorMatch(
            selector=selector,
            count=len(elements),
            text=elements[0].get_text(strip=True) if elements else "",
        )
    return matches
