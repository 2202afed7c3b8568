"""Shared pytest fixtures for register tests."""

import pytest
import structlog

from cash_register import Product


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test installed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def bananas() -> Product:
    return Product("BANA", "Bananas", 0.99, "lb")


@pytest.fixture
def cheerios() -> Product:
    return Product("CHEE", "Cheerios", 6.99)


@pytest.fixture
def wine() -> Product:
    return Product("WINE", "Fine Vine", 44.99)
