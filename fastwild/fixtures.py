"""Correctness and performance case suites for the wildcard matchers."""

from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel


class MatchCase(BaseModel):
    """One subject/pattern pair and the verdict it should produce."""
    subject: str
    pattern: str
    expected: bool
    expected_ignore_case: Optional[bool] = None
    ignore_case_only: bool = False

    def expectation(self, ignore_case: bool = False) -> bool:
        """Return the expected verdict for a case-sensitive or folded run."""
        if ignore_case and self.expected_ignore_case is not None:
            return self.expected_ignore_case
        return self.expected

    def applies(self, ignore_case: bool = False) -> bool:
        """Check whether the case runs in the given mode."""
        return ignore_case or not self.ignore_case_only


class Suite(BaseModel):
    """A named group of cases reported together."""
    name: str
    label: str
    unicode: bool = False
    cases: List[MatchCase] = []


def _case(subject: str, pattern: str, expected: bool, **kwargs) -> MatchCase:
    return MatchCase(subject=subject, pattern=pattern, expected=expected, **kwargs)


ABAB = ("abababababababababababababababababababaacacacacacacacadaeafagahaiajakal"
        "aaaaaaaaaaaaaaaaaffafagaagggagaaaaaaaab")
A_RUN = "a" * 90 + "b"
ABC_GROWING = "abcabcdabcdeabcdefabcdefgabcdefghabcdefghiabcdefghijabcdefghijkabcdefghijklabcdefghijklmabcdefghijklmn"
ABC_STARRED = "abc*abcd*abcde*abcdef*abcdefg*abcdefgh*abcdefghi*abcdefghij*abcdefghijk*abcdefghijkl*abcdefghijklm*abcdefghijklmn"
STAR_A17 = "*a" * 17 + "*"


TAME_CASES = [
    # Last character mismatch.
    _case("abc", "abd", False),

    # Repeating character sequences.
    _case("abcccd", "abcccd", True),
    _case("mississipissippi", "mississipissippi", True),
    _case("xxxxzzzzzzzzyf", "xxxxzzzzzzzzyfffff", False),
    _case("xxxxzzzzzzzzyf", "xxxxzzzzzzzzyf", True),
    _case("xxxxzzzzzzzzyf", "xxxxzzy.fffff", False),
    _case("xxxxzzzzzzzzyf", "xxxxzzzzzzzzyf", True),
    _case("xyxyxyzyxyz", "xyxyxyzyxyz", True),
    _case("mississippi", "mississippi", True),
    _case("xyxyxyxyz", "xyxyxyxyz", True),
    _case("m ississippi", "m ississippi", True),
    _case("ababac", "ababac?", False),
    _case("dababac", "ababac", False),
    _case("aaazz", "aaazz", True),
    _case("a12b12", "1212", False),
    _case("a12b12", "a12b", False),
    _case("a12b12", "a12b12", True),

    # Mixed case.
    _case("n", "n", True),
    _case("aabab", "aabab", True),
    _case("ar", "ar", True),
    _case("aar", "aaar", False),
    _case("XYXYXYZYXYz", "XYXYXYZYXYz", True),
    _case("missisSIPpi", "missisSIPpi", True),
    _case("mississipPI", "mississipPI", True),
    _case("xyxyxyxyz", "xyxyxyxyz", True),
    _case("miSsissippi", "miSsissippi", True),
    _case("miSsissippi", "miSsisSippi", True, ignore_case_only=True),
    _case("abAbac", "abAbac", True, ignore_case_only=True),
    _case("bLah", "bLaH", True, ignore_case_only=True),
    _case("aAazz", "aAazz", True),
    _case("A12b12", "A12b123", False),
    _case("a12B12", "a12B12", True),
    _case("oWn", "oWn", True),
    _case("bLah", "bLah", True),

    # Single '?'.
    _case("a", "a", True),
    _case("ab", "a?", True),
    _case("abc", "ab?", True),

    # Mixed '?'.
    _case("a", "??", False),
    _case("ab", "??", True),
    _case("abc", "???", True),
    _case("abcd", "????", True),
    _case("abc", "????", False),
    _case("abcd", "?b??", True),
    _case("abcd", "?a??", False),
    _case("abcd", "??c?", True),
    _case("abcd", "??d?", False),
    _case("abcde", "?b?d*?", True),

    # Longer strings.
    _case(A_RUN, A_RUN, True),
    _case(ABAB, ABAB, True),
    _case(ABAB, ABAB.replace("ajakal", "ajaxal"), False),
    _case(ABAB, ABAB.replace("agaagggag", "agaggggag"), False),
    _case("aaabbaabbaab", "aaabbaabbaab", True),
    _case("a" * 34, "a" * 34, True),
    _case("a" * 17, "a" * 17, True),
    _case("a" * 16, "a" * 17, False),
    _case(ABC_GROWING, "abc" * 17, False),
    _case(ABC_GROWING, ABC_GROWING, True),
    _case("abcabcdabcdabcabcd", "abcabc?abcabcabc", False),
    _case("abcabcdabcdabcabcdabcdabcabcdabcabcabcd", "abcabc?abc?abcabc?abc?abc?bc?abc?bc?bcd", True),
    _case("?abc?", "?abc?", True),
]


EMPTY_CASES = (
    [_case("", pattern, False) for pattern in [
        "abd", "abcccd", "mississipissippi", "xxxxzzzzzzzzyfffff",
        "xxxxzzzzzzzzyf", "xxxxzzy.fffff", "xxxxzzzzzzzzyf", "xyxyxyzyxyz",
        "mississippi", "xyxyxyxyz", "m ississippi", "ababac*", "ababac",
        "aaazz", "1212", "a12b", "a12b12", "n", "aabab", "ar", "aaar",
        "XYXYXYZYXYz", "missisSIPpi", "mississipPI", "xyxyxyxyz",
        "miSsissippi", "miSsisSippi", "abAbac", "abAbac", "aAazz",
        "A12b123", "a12B12", "oWn", "bLah", "bLaH",
    ]]
    + [_case("", "", True)]
    + [_case(subject, "", False) for subject in [
        "abc", "abcccd", "mississipissippi", "xxxxzzzzzzzzyf",
        "xxxxzzzzzzzzyf", "xxxxzzzzzzzzyf", "xxxxzzzzzzzzyf", "xyxyxyzyxyz",
        "mississippi", "xyxyxyxyz", "m ississippi", "ababac", "dababac",
        "aaazz", "a12b12", "a12b12", "a12b12", "n", "aabab", "ar", "aar",
        "XYXYXYZYXYz", "missisSIPpi", "mississipPI", "xyxyxyxyz",
        "miSsissippi", "miSsissippi", "abAbac", "abAbac", "aAazz", "A12b12",
        "a12B12", "oWn", "bLah", "bLah",
    ]]
)


WILD_CASES = [
    # First wildcard after a total match.
    _case("Hi", "Hi*", True),

    # Mismatch after '*'.
    _case("abc", "ab*d", False),

    # Repeating character sequences.
    _case("abcccd", "*ccd", True),
    _case("mississipissippi", "*issip*ss*", True),
    _case("xxxx*zzzzzzzzy*f", "xxxx*zzy*fffff", False),
    _case("xxxx*zzzzzzzzy*f", "xxx*zzy*f", True),
    _case("xxxxzzzzzzzzyf", "xxxx*zzy*fffff", False),
    _case("xxxxzzzzzzzzyf", "xxxx*zzy*f", True),
    _case("xyxyxyzyxyz", "xy*z*xyz", True),
    _case("mississippi", "*sip*", True),
    _case("xyxyxyxyz", "xy*xyz", True),
    _case("mississippi", "mi*sip*", True),
    _case("ababac", "*abac*", True),
    _case("aaazz", "a*zz*", True),
    _case("a12b12", "*12*23", False),
    _case("a12b12", "a12b", False),
    _case("a12b12", "*12*12*", True),

    # Repeating text that matches '*' and then '?'.
    _case("caaab", "*a?b", True),
    _case("aaaaa", "*aa?", True),

    # '*' in the subject.
    _case("*", "*", True),
    _case("a*abab", "a*b", True),
    _case("a*r", "a*", True),
    _case("a*ar", "a*aar", False),

    # Double wildcards.
    _case("XYXYXYZYXYz", "XY*Z*XYz", True),
    _case("missisSIPpi", "*SIP*", True),
    _case("mississipPI", "*issip*PI", True),
    _case("xyxyxyxyz", "xy*xyz", True),
    _case("miSsissippi", "mi*sip*", True),
    _case("abAbac", "*Abac*", True),
    _case("aAazz", "a*zz*", True),
    _case("A12b12", "*12*23", False),
    _case("a12B12", "*12*12*", True),
    _case("oWn", "*oWn*", True),

    # No wildcards at all.
    _case("bLah", "bLah", True),

    # Mixed wildcards.
    _case("a", "*?", True),
    _case("ab", "*?", True),
    _case("abc", "*?", True),
    _case("a", "??", False),
    _case("ab", "?*?", True),
    _case("ab", "*?*?*", True),
    _case("abc", "?**?*?", True),
    _case("abc", "?**?*&?", False),
    _case("abcd", "?b*??", True),
    _case("abcd", "?a*??", False),
    _case("abcd", "?**?c?", True),
    _case("abcd", "?**?d?", False),
    _case("abcde", "?*b*?*d*?", True),

    # Single-character matches.
    _case("bLah", "bL?h", True),
    _case("bLaaa", "bLa?", False),
    _case("bLah", "bLa?", True),
    _case("bLaH", "?Lah", False, expected_ignore_case=True),
    _case("bLaH", "?LaH", True),

    # Many wildcards.
    _case(A_RUN, "a*a*a*a*a*a*aa*aaa*a*a*b", True),
    _case(ABAB, "*a*b*ba*ca*a*aa*aaa*fa*ga*b*", True),
    _case(ABAB, "*a*b*ba*ca*a*x*aaa*fa*ga*b*", False),
    _case(ABAB, "*a*b*ba*ca*aaaa*fa*ga*gggg*b*", False),
    _case(ABAB, "*a*b*ba*ca*aaaa*fa*ga*ggg*b*", True),
    _case("aaabbaabbaab", "*aabbaa*a*", True),
    _case("a*" * 17, "a*" * 17, True),
    _case("a" * 17, STAR_A17, True),
    _case("a" * 16, STAR_A17, False),
    _case(ABC_STARRED, "abc*" * 16 + "a            bc*", False),
    _case(ABC_STARRED, "abc*" * 12, True),
    _case("abc*abcd*abcd*abc*abcd", "abc*abc*abc*abc*abc", False),
    _case("abc*abcd*abcd*abc*abcd*abcd*abc*abcd*abc*abc*abcd", "abc*" * 10 + "abcd", True),
    _case("abc", "********a********b********c********", True),
    _case("********a********b********c********", "abc", False),
    _case("abc", "********a********b********b********", False),
    _case("*abc*", "***a*b*c***", True),

    # Folded-case runs only.
    _case("mississippi", "*issip*PI", True, ignore_case_only=True),
    _case("miSsissippi", "mi*Sip*", True, ignore_case_only=True),
    _case("bLah", "bLaH", True, ignore_case_only=True),

    # Empty input around wildcards.
    _case("", "?", False),
    _case("", "*?", False),
    _case("", "", True),
    _case("a", "", False),
]


UTF8_CASES = [
    _case("🐂🚀♥🍀貔貅🦁★□√🚦€¥☯🐴😊🍓🐕🎺🧊☀☂🐉", "*☂🐉", True),
    _case("AbCD", "abc?", True, ignore_case_only=True),
    _case("AbC★", "abc?", True, ignore_case_only=True),
    _case("⚛⚖☁o", "⚛⚖☁O", False, expected_ignore_case=True),
    _case("▲●🐎✗🤣🐶♫🌻ॐ", "▲●☂*", False),
    _case("𓋍𓋔𓎍", "𓋍𓋔?", True),
    _case("𓋍𓋔𓎍", "𓋍?𓋔𓎍", False),
    _case("♅☌♇", "♅☌♇", True),
    _case("⚛⚖☁", "⚛🍄☁", False),
    _case("⚛⚖☁O", "⚛⚖☁0", False),
    _case("गते गते पारगते पारसंगते बोधि स्वाहा", "गते गते पारगते प????गते बोधि स्वाहा", True),
    _case("Мне нужно выучить русский язык, чтобы лучше оценить Пушкина.",
          "Мне нужно выучить * язык, чтобы лучше оценить *.", True),
    _case("אני צריך ללמוד אנגלית כדי להעריך את גינסברג",
          " אני צריך ללמוד אנגלית כדי להעריך את ???????", False),
    _case("ગિન્સબર્ગની શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે અંગ્રેજી શીખવું પડશે.",
          "* શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે * શીખવું પડશે.", True),
    _case("ગિન્સબર્ગની શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે અંગ્રેજી શીખવું પડશે.",
          "??????????? શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે * શીખવું પડશે.", True),
    _case("ગિન્સબર્ગની શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે અંગ્રેજી શીખવું પડશે.",
          "ગિન્સબર્ગની શ્રેષ્ઠ પ્રશંસા કરવા માટે મારે હિબ્રુ ભાષા શીખવી પડશે.", False),

    # Characters whose code points end in the values of '*' and '?'.
    _case("ḪؿꜪἪꜿ", "ḪؿꜪἪꜿ", True),
    _case("ḪؿUἪꜿ", "ḪؿꜪἪꜿ", False),
    _case("ḪؿꜪἪꜿ", "ḪؿꜪἪꜿЖ", False),
    _case("ḪؿꜪἪꜿ", "ЬḪؿꜪἪꜿ", False),
    _case("ḪؿꜪἪꜿ", "?ؿꜪ*ꜿ", True),
]


_BUILTIN: Dict[str, Suite] = {
    "tame": Suite(name="tame", label="tame string", cases=TAME_CASES),
    "empty": Suite(name="empty", label="empty string", cases=EMPTY_CASES),
    "wild": Suite(name="wild", label="wildcard", cases=WILD_CASES),
    "utf8": Suite(name="utf8", label="UTF-8", unicode=True, cases=UTF8_CASES),
}


def builtin_suites() -> List[Suite]:
    """Return the built-in suites in run order."""
    return list(_BUILTIN.values())


def get_suite(name: str) -> Suite:
    """Look up a built-in suite by name."""
    if name not in _BUILTIN:
        raise KeyError(f"Unknown suite: {name}")
    return _BUILTIN[name]


def load_suites(path: str) -> List[Suite]:
    """Load suites from a YAML file with a top-level ``suites`` list."""
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    return [Suite(**entry) for entry in data.get("suites", [])]
