from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Union

# A recognition pattern is either a compiled regex or a case-insensitive literal.
Pattern = Union["re.Pattern[str]", str]

@dataclass(frozen=True)
class FieldDefinition:
    id: str
    recognition_patterns: tuple[Pattern, ...] = ()
    keyword_aliases: tuple[str, ...] = ()  # already normalized, e.g. "fathersname"
    loose_keywords: tuple[str, ...] = ()

class FieldCatalog:
    """
    Immutable registry of canonical form fields.

    Definition order is significant: label resolution walks the catalog
    front to back and the first hit wins. The loose keyword fallback keeps
    its own ordering (``loose_hints``) because it deliberately differs from
    catalog order.
    """

    def __init__(self, definitions: Iterable[FieldDefinition], loose_hints: Iterable[tuple[str, str]] | None = None):
        defs = tuple(definitions)
        by_id: dict[str, FieldDefinition] = {}
        for d in defs:
            if d.id in by_id:
                raise ValueError(f"duplicate field id in catalog: {d.id}")
            by_id[d.id] = d

        if loose_hints is None:
            hints = tuple((d.id, kw) for d in defs for kw in d.loose_keywords)
        else:
            hints = tuple(loose_hints)
            for fid, kw in hints:
                if fid not in by_id:
                    raise ValueError(f"loose keyword {kw!r} refers to unknown field {fid}")
                if kw not in by_id[fid].loose_keywords:
                    raise ValueError(f"loose keyword {kw!r} is not declared on field {fid}")

        self._definitions = defs
        self._by_id = MappingProxyType(by_id)
        self._loose_hints = hints

    @property
    def definitions(self) -> tuple[FieldDefinition, ...]:
        return self._definitions

    @property
    def field_ids(self) -> tuple[str, ...]:
        return tuple(d.id for d in self._definitions)

    @property
    def loose_hints(self) -> tuple[tuple[str, str], ...]:
        return self._loose_hints

    def get(self, field_id: str) -> FieldDefinition | None:
        return self._by_id.get(field_id)

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._by_id

    def __iter__(self) -> Iterator[FieldDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)


def _rx(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)

def _value_rx(pattern: str) -> re.Pattern[str]:
    # value shapes: ASCII digits/boundaries only
    return re.compile(pattern, re.ASCII)

# (id, recognition patterns, normalized keyword aliases)
# Hindi / Tamil / Telugu label forms live here so a new script is a data change.
_FIELD_TABLE: list[tuple[str, tuple[Pattern, ...], tuple[str, ...]]] = [
    ("fullName",
     (_rx(r"full\s*name"), _rx(r"name\s*of\s*applicant"), _rx(r"applicant.*name"),
      _rx(r"पूरा\s*नाम"), _rx(r"முழு\s*பெயர்"), _rx(r"పూర్తి\s*పేరు")),
     ("fullname", "nameofapplicant", "applicantname", "fullnameofapplicant", "nameofcandidate")),
    ("dateOfBirth",
     (_rx(r"date\s*of\s*birth"), _rx(r"d\.o\.b"), _rx(r"\bdob\b"),
      _rx(r"जन्म\s*तिथि"), _rx(r"பிறந்த\s*தேதி"), _rx(r"పుట్టిన\s*తేదీ"),
      _value_rx(r"(\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4})")),
     ("dateofbirth", "dob", "birthdate", "bornon", "datebirth", "dateofbirthdd")),
    ("email",
     ("email", _rx(r"e-?mail"), "ईमेल", "மின்னஞ்சல்", "ఇమెయిల్",
      _value_rx(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")),
     ("email", "emailid", "emailaddress", "mail")),
    ("phoneNumber",
     ("mobile", "phone", _rx(r"contact\s*no"), "मोबाइल", "மொபைல்", "మొబైల్",
      _value_rx(r"\b[6-9]\d{9}\b")),
     ("mobile", "phone", "mobileno", "phoneno", "contactno", "cellno", "cell", "contactnumber")),
    ("aadhaar",
     (_rx(r"aadhaar|aadhar|uid"), "आधार", "ஆதார்", "ఆధార్",
      _value_rx(r"\b\d{4}\s*\d{4}\s*\d{4}\b")),
     ("aadhaar", "aadhar", "uidno", "uidainumber", "adhaar")),
    ("address",
     ("address", "residential", "पता", "முகவரி", "చిరునామా"),
     ("address", "residentialaddress", "permanentaddress", "presentaddress", "houseaddress")),
    ("city",
     ("city", "town", "शहर", "நகரம்", "నగరం"),
     ("city", "town", "citytown", "cityname")),
    ("state",
     (_rx(r"\bstate\b"), "राज्य", "மாநிலம்", "రాష్ట్రం"),
     ("state", "statename", "stateofresidence")),
    ("pincode",
     (_rx(r"pincode|pin\s*code|postal"), "पिन", "பின்", "పిన్", _value_rx(r"\b\d{6}\b")),
     ("pincode", "pinno", "postalcode", "zip", "zipcode")),
    ("fatherName",
     ("father", "पिता", "தந்தை", "తండ్రి"),
     ("fathername", "fathersname", "fatherof", "nameoffather")),
    ("motherName",
     ("mother", "माता", "தாய்", "తల్లి"),
     ("mothername", "mothersname", "nameofmother")),
    ("occupation",
     ("occupation", "profession", "पेशा", "தொழில்", "వృత్తి"),
     ("occupation", "profession", "jobtitle", "designation", "work")),
    ("gender",
     (_rx(r"\bgender\b"), _rx(r"\bsex\b"), "लिंग", "பாலினம்"),
     ("gender", "sex")),
    ("maritalStatus",
     ("marital", "marriage", "वैवाहिक"),
     ("maritalstatus", "marital", "marriagestatus")),
    ("nationality",
     ("nationality", "राष्ट्रीयता"),
     ("nationality", "citizen", "citizenship")),
    ("bloodGroup",
     (_rx(r"blood\s*group"),),
     ("bloodgroup", "bloodtype", "bg")),
    ("qualification",
     (_rx(r"qualification|education"),),
     ("qualification", "education", "educationalqualification", "highestqualification")),
    ("bankName",
     (_rx(r"bank\s*name"),),
     ("bankname", "bank", "bankofaccount", "nameofbank")),
    ("accountNumber",
     (_rx(r"account\s*no|ac\s*no"),),
     ("accountno", "accountnumber", "acno", "acnumber", "bankaccountno")),
    ("ifscCode",
     ("ifsc",),
     ("ifsc", "ifsccode")),
    ("passportNo",
     ("passport",),
     ("passport", "passportno", "passportnumber")),
    ("drivingLicenseNo",
     (_rx(r"driving\s*license|dl\s*no"),),
     ("drivinglicense", "dlno", "drivinglicenceno", "driverlicense")),
    ("district",
     ("district",),
     ("district", "districtname")),
    ("village",
     (_rx(r"village|locality"),),
     ("village", "locality", "villagename")),
    ("place",
     (_rx(r"\bplace\b"),),
     ("place", "placeofsigning")),
    ("pan",
     (_rx(r"pan\s*no|permanent\s*account"), _value_rx(r"\b[A-Z]{5}\d{4}[A-Z]\b")),
     ("pan", "panno", "pannumber", "permanentaccount")),
    # alias-only fields: no reliable label regex, recognized from fused keywords
    ("voterId", (), ("voterid", "epic", "epicno", "votercard")),
    ("religion", (), ("religion",)),
    ("category", (), ("category", "caste", "castecategory")),
    ("annualIncome", (), ("annualincome", "income", "yearlyincome")),
    ("tehsil", (), ("tehsil", "taluk", "mandal")),
    ("nomineeName", (), ("nominee", "nomineename")),
    ("nomineeRelation", (), ("nomineerelation", "relationwithnominee")),
]

# Ordered weak hints for short, mangled labels ("NAME", "Birth", "Pin").
_LOOSE_HINTS: list[tuple[str, str]] = [
    ("fullName", "name"),
    ("dateOfBirth", "birth"),
    ("dateOfBirth", "born"),
    ("email", "email"),
    ("phoneNumber", "phone"),
    ("phoneNumber", "mobile"),
    ("aadhaar", "aadh"),
    ("address", "address"),
    ("fatherName", "father"),
    ("motherName", "mother"),
    ("pan", "pan"),
    ("pincode", "pin"),
]

def build_default_catalog() -> FieldCatalog:
    defs = []
    for fid, patterns, aliases in _FIELD_TABLE:
        loose = tuple(kw for hid, kw in _LOOSE_HINTS if hid == fid)
        defs.append(FieldDefinition(fid, patterns, aliases, loose))
    return FieldCatalog(defs, loose_hints=_LOOSE_HINTS)

DEFAULT_CATALOG = build_default_catalog()

KNOWN_FIELD_IDS = DEFAULT_CATALOG.field_ids
