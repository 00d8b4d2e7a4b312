"""Shared test fixtures."""

import pytest

from storefront.models import ProductRow, StorefrontConfig

SHEET_CSV = (
    "ID,Navn,Kategori,Basispris,Pris i alt,Antal,Vist,Kort beskrivelse,Beskrivelse\n"
    "K1,Kaffebønner,Kaffe.,100,110,3,,<p>Mørkristet</p>,<p><strong>Stærk</strong> kaffe</p>\n"
    "\n"
    "T1,Grøn te,Te,\"40,00\",50,0,1,Frisk,\n"
    ",Uden ID,Diverse,10,12,1,,,\n"
    "B1,Æblekage,Bagværk,,\"45,50\",2,1,<b>Hjemmebagt</b>,\n"
    "S1,Skjult kop,Tilbehør,20,25,4,0,,\n"
)


@pytest.fixture
def sheet_csv():
    """A small sheet export: one row without ID, one sold out, one hidden."""
    return SHEET_CSV


@pytest.fixture
def sample_row():
    """A raw sheet row keyed by column header."""
    return {
        "ID": " K1 ",
        "Navn": " Kaffebønner ",
        "Kategori": "Kaffe.",
        "Basispris": "100",
        "Pris i alt": "110",
        "Antal": "3",
        "Vist": "",
        "Kort beskrivelse": "<p>Mørkristet</p>",
        "Beskrivelse": "<p><strong>Stærk</strong> kaffe</p>",
    }


@pytest.fixture
def config():
    """Storefront settings pointing at a fake sheet."""
    return StorefrontConfig(
        sheet_csv_url="https://sheets.example.com/pub?output=csv",
        image_base="img",
    )


@pytest.fixture
def make_product():
    """Factory for listed products with a single price."""
    def _make(product_id, name="", category="", price=0.0, stock=5, visible=True, **kwargs):
        values = dict(
            id=product_id,
            name=name,
            category=category,
            current_price=price,
            normal_price=price,
            stock_count=stock,
            visible=visible,
        )
        values.update(kwargs)
        return ProductRow(**values)
    return _make


@pytest.fixture
def offer_product():
    """A product on offer: normal price 125, now 110."""
    return ProductRow(
        id="K1",
        name="Kaffebønner",
        category="Kaffe",
        base_price=100.0,
        current_price=110.0,
        normal_price=125.0,
        is_on_offer=True,
        stock_count=3,
        description_html="<p><strong>Stærk</strong> kaffe</p>",
        short_description_html="<p>Mørkristet</p>",
    )


class RecordingRenderer:
    """ProductRenderer that keeps what it was asked to render."""

    def __init__(self):
        self.renders = []
        self.category_options = []
        self.errors = []

    def render(self, products):
        self.renders.append(list(products))

    def populate_categories(self, options):
        self.category_options = list(options)

    def show_error(self, message):
        self.errors.append(message)


@pytest.fixture
def recording_renderer():
    return RecordingRenderer()
