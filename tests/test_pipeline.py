"""
Tests for the five-pass extraction pipeline.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from form_autofill.answers import AnswerMap
from form_autofill.errors import MalformedInputError
from form_autofill.pipeline import extract


class TestAnswerMap:
    """First writer wins."""

    def test_set_if_absent(self):
        answers = AnswerMap()
        assert answers.set_if_absent("email", "a@b.io") is True
        assert answers.set_if_absent("email", "c@d.io") is False
        assert answers == {"email": "a@b.io"}

    def test_is_plain_mapping(self):
        answers = AnswerMap(fullName="Anita Devi")
        assert {**answers, "fullName": "Override"} == {"fullName": "Override"}


class TestEndToEnd:
    """Whole-document behavior."""

    def test_reference_document(self):
        text = "Full Name: Anita Devi\nDOB: 12/05/1988\nEmail - anita@test.com\n9876543210"
        assert extract(text) == {
            "fullName": "Anita Devi",
            "dateOfBirth": "12/05/1988",
            "email": "anita@test.com",
            "phoneNumber": "9876543210",
        }

    def test_application_form(self, pipeline, application_text):
        assert pipeline.extract(application_text) == {
            "fullName": "Anita Devi",
            "dateOfBirth": "12/05/1988",
            "email": "anita@test.com",
            "fatherName": "Ramesh Kumar",
            "address": "14 MG Road, Indiranagar",
            "pincode": "560038",
            "phoneNumber": "9876543210",
        }

    def test_idempotent(self, pipeline, application_text):
        assert pipeline.extract(application_text) == pipeline.extract(application_text)

    def test_concurrent_calls_are_independent(self, pipeline, application_text):
        texts = [application_text, "Email: x@y.org", "nothing here, really."] * 4
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(pipeline.extract, texts))
        assert results == [pipeline.extract(t) for t in texts]

    def test_prose_gives_empty_map(self):
        text = "this document was scanned, twice.\nnothing useful is here, sorry."
        assert extract(text) == {}

    def test_empty_text(self):
        assert extract("") == {}

    def test_crlf_lines(self):
        assert extract("Full Name: Anita Devi\r\nCity: Pune\r\n") == {"fullName": "Anita Devi", "city": "Pune"}

    @pytest.mark.parametrize("bad", [None, 42, b"Full Name: Anita", ["Full Name: Anita"]])
    def test_non_text_rejected(self, bad):
        with pytest.raises(MalformedInputError):
            extract(bad)

    def test_malformed_input_is_type_error(self):
        with pytest.raises(TypeError):
            extract(3.14)


class TestLabelValuePass:
    """Pass 1: "Label: Value" lines."""

    @pytest.mark.parametrize("line", ["City: Pune", "City - Pune", "City = Pune", "City:Pune"])
    def test_delimiters(self, line):
        assert extract(line)["city"] == "Pune"

    def test_split_on_first_delimiter(self):
        assert extract("Address: 4-B, Sector 9")["address"] == "4-B, Sector 9"

    def test_multiscript_label(self):
        assert extract("पिता: Ramesh Kumar")["fatherName"] == "Ramesh Kumar"

    def test_first_writer_wins_over_later_lines(self):
        answers = extract("Full Name: Anita Devi\nName: Someone Else")
        assert answers["fullName"] == "Anita Devi"

    def test_first_writer_wins_over_entity_pass(self):
        answers = extract("Date of Birth: not known\n12/05/1988")
        assert answers["dateOfBirth"] == "not known"

    def test_label_of_sixty_chars_matches(self):
        label = "Full Name of the applicant "
        label += "x" * (60 - len(label))
        assert len(label) == 60
        assert extract(f"{label}: Anita Devi")["fullName"] == "Anita Devi"

    def test_label_of_sixty_one_chars_skipped(self):
        label = "Full Name of the applicant "
        label += "x" * (61 - len(label))
        assert len(label) == 61
        assert "fullName" not in extract(f"{label}: Anita Devi")

    def test_overlong_label_recovered_later(self):
        label = "Full Name of the applicant "
        label += "x" * (61 - len(label))
        answers = extract(f"{label}: Anita Devi\nAnita Devi")
        assert answers["fullName"] == "Anita Devi"

    def test_value_longer_than_300_skipped(self):
        assert "city" not in extract("City: " + "p" * 301)

    def test_unrecognized_label_dropped(self):
        assert extract("Remarks: none") == {}

    def test_bare_value_as_label(self):
        """A value-shaped left side still resolves; the right side becomes the value."""
        assert extract("12/05/1988 = verified")["dateOfBirth"] == "verified"


class TestEntityPass:
    """Pass 2: entity regexes over the whole text."""

    def test_entities_found_without_labels(self):
        text = "Contact me at test.user@example.com or 9876543210. UID 1234 5678 9012"
        assert extract(text) == {
            "email": "test.user@example.com",
            "phoneNumber": "9876543210",
            "aadhaar": "1234 5678 9012",
        }

    def test_pan_and_pincode(self):
        answers = extract("ABCDE1234F\n560038")
        assert answers["pan"] == "ABCDE1234F"
        assert answers["pincode"] == "560038"

    def test_hyphen_in_label_falls_through(self):
        """'E-mail:' splits at the hyphen, so Pass 1 misses and Pass 2 recovers."""
        assert extract("E-mail: anita@test.com") == {"email": "anita@test.com"}

    def test_alias_label_in_pass_one(self):
        assert extract("mail me: a.b@c.in")["email"] == "a.b@c.in"


class TestContextPass:
    """Pass 3: standalone label line followed by the value line."""

    def test_next_line_value(self):
        assert extract("Father's Name\nRamesh Kumar")["fatherName"] == "Ramesh Kumar"

    def test_label_line_too_short(self):
        assert "city" not in extract("PO\nPune")

    def test_label_line_with_digits_ignored(self):
        assert "occupation" not in extract("Occupation 2\nFarmer")

    def test_value_line_too_long(self):
        assert "occupation" not in extract("Occupation\n" + "f" * 200)

    def test_value_line_under_limit(self):
        assert extract("Occupation\n" + "f" * 199)["occupation"] == "f" * 199


class TestNameFallbackPass:
    """Pass 4: applicant name when no label gave one."""

    def test_proper_case_line(self):
        assert extract("APPLICANT COPY 2024\nSita Ram Gupta")["fullName"] == "Sita Ram Gupta"

    def test_loose_line(self):
        assert extract("ref 1002\nsita ram gupta")["fullName"] == "sita ram gupta"

    def test_not_applied_when_name_set(self):
        assert extract("Full Name: Anita Devi\nSita Ram Gupta")["fullName"] == "Anita Devi"


class TestDateFallbackPass:
    """Pass 5: date anywhere in the text."""

    def test_date_glued_to_words(self):
        assert extract("ref born12/05/1988x") == {"dateOfBirth": "12/05/1988"}


class TestLogging:
    """Per-pass matches are logged at DEBUG."""

    def test_pass_logging(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="form_autofill.pipeline"):
            extract("Full Name: Anita Devi\n9876543210")
        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("P1 'Full Name' -> fullName") for m in messages)
        assert any(m.startswith("P2 phoneNumber") for m in messages)
