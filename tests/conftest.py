# tests/conftest.py
"""Shared pytest fixtures and test helpers."""

from typing import Optional

import pytest

from manuals_search.models.manual import Manual

from drive_fakes import folder, pdf


@pytest.fixture
def depth_two_tree():
    """Root -> category -> brand -> PDFs."""
    return {
        "root": [folder("cat-1", "Appliances"), folder("cat-2", "HVAC")],
        "cat-1": [folder("brand-1", "Bosch")],
        "cat-2": [folder("brand-2", "Daikin"), folder("brand-3", "Carrier")],
        "brand-1": [pdf("f1", "WAT28400.pdf", "https://drive.google.com/file/d/f1/view?usp=drivesdk")],
        "brand-2": [pdf("f2", "FTXS35.pdf"), pdf("f3", "FTXM25.pdf")],
        "brand-3": [pdf("f4", "48TC.pdf")],
    }


@pytest.fixture
def manual_factory():
    """Fixture providing a factory function for creating Manual instances.

    Usage:
        def test_example(manual_factory):
            manual = manual_factory("id-1", "Title", brand="Bosch", category="Appliances")
    """
    def _make_manual(
        id: str,
        title: str,
        brand: Optional[str] = None,
        category: Optional[str] = None,
        tags: tuple = (),
    ) -> Manual:
        path = tuple(p for p in (category, brand) if p)
        return Manual(
            id=id,
            title=title,
            url=f"https://drive.google.com/file/d/{id}/view",
            path=path,
            brand=brand,
            category=category,
            tags=tags,
        )
    return _make_manual
