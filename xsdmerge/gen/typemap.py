# Mapping of the XML Schema primitive types onto C++ types
from typing import Mapping, Optional

# Emitted instead of a type we don't know how to map. It is not valid
# C++ on purpose: the generated code fails to compile rather than
# silently dropping the field.
INVALID_TYPE = "(invalid type)"

typemap = {
    "xs:string": "std::string",
    "xs:boolean": "bool",
    "xs:decimal": "double",
    "xs:float": "float",
    "xs:double": "double",
    "xs:duration": "std::chrono::milliseconds",
    "xs:dateTime": "std::chrono::time_point<std::chrono::system_clock>",
    "xs:date": "std::chrono::year_month_day",
    "xs:time": "std::chrono::hh_mm_ss",
    "xs:gYearMonth": "std::chrono::year_month",
    "xs:gYear": "std::chrono::year",
    "xs:gMonthDay": "std::chrono::month_day",
    "xs:gDay": "std::chrono::day",
    "xs:gMonth": "std::chrono::month",
    "xs:base64Binary": "std::vector<unsigned char>",
    "xs:anyURI": "std::string",
}


def map_type(name: str, overrides: Optional[Mapping[str, str]] = None) -> str:
    """Return the C++ spelling for an XML Schema type name.

    An entry in `overrides` wins over the builtin table. Unknown names
    map to `INVALID_TYPE`.
    """
    if overrides and name in overrides:
        return overrides[name]
    return typemap.get(name, INVALID_TYPE)
