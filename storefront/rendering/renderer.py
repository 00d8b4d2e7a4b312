"""
Product Grid Renderer

Fills the storefront page template with product cards.

The page template carries the same contract as the storefront's HTML:
- #grid: container the cards are rendered into
- template#card: card markup with the slots .thumb, .title, .cat, .desc,
  .before, .now and .stock
- #search, #category, #sort: the three controls

Rendering goes through the ProductRenderer protocol so the catalog logic
never touches markup.
"""

import copy
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

from bs4 import BeautifulSoup, Tag

from ..common.constants import SORT_ALIASES
from ..common.danish_locale import format_dkk, format_quantity
from ..models import FilterState, ProductRow, StorefrontConfig

logger = logging.getLogger(__name__)

HIDDEN_CLASS = 'hidden'
IMAGE_ALT_FALLBACK = 'Produktbillede'
IN_STOCK_LABEL = 'På lager: {quantity}'
SOLD_OUT_LABEL = 'Udsolgt'

# Swap to the placeholder once, so a broken placeholder cannot loop
IMAGE_ONERROR = 'this.onerror=null;this.src=this.dataset.fallback;'

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="da">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title></title>
<style>
body { font-family: system-ui, sans-serif; margin: 0; padding: 1rem; background: #f9fafb; color: #111827; }
#controls { display: flex; flex-wrap: wrap; gap: .5rem; margin-bottom: 1rem; }
#grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(240px, 1fr)); gap: 1rem; }
.card { background: #fff; border-radius: .5rem; overflow: hidden; box-shadow: 0 1px 3px rgba(0,0,0,.1); }
.card .thumb { width: 100%; aspect-ratio: 4 / 3; object-fit: cover; background: #e5e7eb; }
.card .body { padding: .75rem; }
.card .title { font-size: 1.1rem; margin: 0 0 .25rem; }
.card .cat { color: #6b7280; font-size: .85rem; margin: 0; }
.card .before { text-decoration: line-through; color: #9ca3af; margin-right: .5rem; }
.card .now { font-weight: 600; }
.card .stock { font-size: .85rem; color: #374151; }
.hidden { display: none; }
</style>
</head>
<body>
<form id="controls" method="get" action="">
<input id="search" name="q" type="search" placeholder="Søg efter navn, kategori eller varenummer" onchange="this.form.submit()">
<select id="category" name="category" onchange="this.form.submit()"></select>
<select id="sort" name="sort" onchange="this.form.submit()">
<option value="">Sortér</option>
<option value="name-asc">Navn (A-Å)</option>
<option value="price-asc">Pris (lav-høj)</option>
<option value="price-desc">Pris (høj-lav)</option>
</select>
</form>
<main id="grid"></main>
<template id="card">
<article class="card">
<img class="thumb" loading="lazy" alt="">
<div class="body">
<h2 class="title"></h2>
<p class="cat"></p>
<div class="desc"></div>
<p class="price"><span class="before hidden"></span><span class="now"></span></p>
<p class="stock"></p>
</div>
</article>
</template>
</body>
</html>
"""


class ProductRenderer(Protocol):
    """Capability the loader renders through."""

    def render(self, products: Sequence[ProductRow]) -> None:
        ...

    def populate_categories(self, options: Iterable[Tuple[str, str]]) -> None:
        ...

    def show_error(self, message: str) -> None:
        ...


class HtmlGridRenderer:
    """
    Renders products into an HTML page.

    Usage:
        renderer = HtmlGridRenderer(config)
        renderer.populate_categories([("", "Alle kategorier"), ("Kaffe", "Kaffe")])
        renderer.render(products)
        html = renderer.to_html()
    """

    def __init__(self, config: StorefrontConfig, template: str = PAGE_TEMPLATE):
        """
        Initialize the renderer.

        Args:
            config: Storefront settings (image base, placeholder, page title)
            template: Page markup honouring the grid/card/controls contract

        Raises:
            ValueError: If the template lacks the grid or card template
        """
        self.config = config
        self.soup = BeautifulSoup(template, 'html.parser')

        self.grid = self.soup.find(id='grid')
        self.card_template = self.soup.find('template', id='card')
        if self.grid is None or self.card_template is None:
            raise ValueError("Page template needs #grid and template#card")

        if self.soup.title is not None and config.page_title:
            self.soup.title.string = config.page_title

    def render(self, products: Sequence[ProductRow]) -> None:
        """Replace the grid content with one card per product."""
        self.grid.clear()
        for product in products:
            for node in self._build_card(product):
                self.grid.append(node)
        logger.debug("Rendered %d product cards", len(products))

    def populate_categories(self, options: Iterable[Tuple[str, str]]) -> None:
        """Replace the options of the category select."""
        select = self.soup.find(id='category')
        if select is None:
            return
        select.clear()
        for value, label in options:
            option = self.soup.new_tag('option', attrs={'value': value})
            option.string = label
            select.append(option)

    def show_error(self, message: str) -> None:
        """Replace the grid with a static message."""
        self.grid.clear()
        paragraph = self.soup.new_tag('p')
        paragraph.string = message
        self.grid.append(paragraph)

    def set_controls(self, state: FilterState) -> None:
        """Reflect the current filter values in the controls."""
        search = self.soup.find(id='search')
        if search is not None:
            if state.query:
                search['value'] = state.query
            else:
                search.attrs.pop('value', None)

        sort = SORT_ALIASES.get(state.sort, state.sort)
        for control_id, value in (('category', state.category), ('sort', sort)):
            select = self.soup.find(id=control_id)
            if select is None:
                continue
            for option in select.find_all('option'):
                if value and option.get('value') == value:
                    option['selected'] = 'selected'
                else:
                    option.attrs.pop('selected', None)

    def to_html(self) -> str:
        """Serialize the whole page."""
        return self.soup.decode()

    def write(self, path: str | Path) -> Path:
        """Write the page to a file, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_html(), encoding='utf-8')
        logger.info("Wrote storefront page to %s", path)
        return path

    def _build_card(self, product: ProductRow) -> List:
        card = copy.copy(self.card_template)

        img = card.select_one('.thumb')
        if img is not None:
            img['src'] = self.config.image_url(product.id)
            img['alt'] = product.name or IMAGE_ALT_FALLBACK
            img['data-fallback'] = self.config.placeholder_image
            img['onerror'] = IMAGE_ONERROR

        self._set_text(card, '.title', product.name or f"#{product.id}")
        self._set_text(card, '.cat', product.category)

        desc = card.select_one('.desc')
        if desc is not None:
            desc.clear()
            if product.description_html:
                fragment = BeautifulSoup(product.description_html, 'html.parser')
                for node in list(fragment.contents):
                    desc.append(node.extract())

        before = card.select_one('.before')
        if before is not None:
            if product.is_on_offer:
                before.string = format_dkk(product.normal_price)
                self._remove_class(before, HIDDEN_CLASS)
            else:
                before.clear()
                self._add_class(before, HIDDEN_CLASS)

        self._set_text(card, '.now', format_dkk(product.effective_price))

        if product.stock_count > 0:
            stock = IN_STOCK_LABEL.format(quantity=format_quantity(product.stock_count))
        else:
            stock = SOLD_OUT_LABEL
        self._set_text(card, '.stock', stock)

        return [node.extract() for node in list(card.contents)]

    @staticmethod
    def _set_text(card: Tag, selector: str, text: Optional[str]) -> None:
        element = card.select_one(selector)
        if element is not None:
            element.string = text or ''

    @staticmethod
    def _classes(element: Tag) -> List[str]:
        classes = element.get('class') or []
        if isinstance(classes, str):
            classes = classes.split()
        return list(classes)

    def _add_class(self, element: Tag, name: str) -> None:
        classes = self._classes(element)
        if name not in classes:
            classes.append(name)
        element['class'] = classes

    def _remove_class(self, element: Tag, name: str) -> None:
        element['class'] = [c for c in self._classes(element) if c != name]
