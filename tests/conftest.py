"""
Pytest fixtures shared by the extraction tests.
"""

import pytest

from form_autofill.catalog import DEFAULT_CATALOG
from form_autofill.matcher import LabelMatcher
from form_autofill.pipeline import ExtractionPipeline


@pytest.fixture
def matcher():
    """Label matcher over the default catalog."""
    return LabelMatcher(DEFAULT_CATALOG)


@pytest.fixture
def pipeline():
    """Extraction pipeline over the default catalog."""
    return ExtractionPipeline(DEFAULT_CATALOG)


@pytest.fixture
def application_text():
    """OCR text of a typical filled-in application form."""
    return "\n".join([
        "GOVERNMENT OF INDIA",
        "Full Name: Anita Devi",
        "DOB: 12/05/1988",
        "Email - anita@test.com",
        "Father's Name",
        "Ramesh Kumar",
        "Address = 14 MG Road, Indiranagar",
        "Pin Code: 560038",
        "9876543210",
    ])
