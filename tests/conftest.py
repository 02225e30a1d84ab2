import pytest

from numplan.analysis.analyzer import PhoneAnalyzer, get_analyzer
from numplan.metadata.region import CategoryPatterns, FormatRule, RegionMetadata
from numplan.metadata.store import MetadataStore

# Fixed line and mobile share one pair, so numbers read as fixed_or_mobile.
_US_SUBSCRIBER = CategoryPatterns(valid=r"[2-9]\d{9}", possible=r"\d{10}|\d{7}")


def make_us() -> RegionMetadata:
    return RegionMetadata(
        id="US",
        calling_code="1",
        international_prefix="011",
        national_prefix="1",
        categories={
            "general": CategoryPatterns(valid=r"[2-9]\d{9}", possible=r"\d{10}|\d{7}"),
            "fixed_line": _US_SUBSCRIBER,
            "mobile": _US_SUBSCRIBER,
            "toll_free": CategoryPatterns(valid=r"8(?:00|88)[2-9]\d{6}", possible=r"\d{10}"),
        },
        formats=(FormatRule(r"(\d{3})(\d{3})(\d{4})", r"(\1) \2-\3", leading_digits="[2-9]"),),
    )


def make_gb() -> RegionMetadata:
    return RegionMetadata(
        id="GB",
        calling_code="44",
        international_prefix="00",
        national_prefix="0",
        categories={
            "general": CategoryPatterns(valid=r"[1-9]\d{9}", possible=r"\d{7,10}"),
            "fixed_line": CategoryPatterns(valid=r"[12]\d{9}"),
            "mobile": CategoryPatterns(valid=r"7\d{9}"),
        },
        formats=(
            FormatRule(r"(\d{2})(\d{4})(\d{4})", r"\1 \2 \3", leading_digits="2"),
            FormatRule(r"(\d{4})(\d{6})", r"\1 \2", leading_digits="7"),
        ),
    )


def make_in() -> RegionMetadata:
    return RegionMetadata(
        id="IN",
        calling_code="91",
        international_prefix="00",
        national_prefix="0",
        double_prefix=True,
        categories={
            "general": CategoryPatterns(valid=r"[2-9]\d{9}", possible=r"\d{10}"),
            "fixed_line": CategoryPatterns(valid=r"[2-5]\d{9}"),
            "mobile": CategoryPatterns(valid=r"[6-9]\d{9}"),
        },
    )


def make_sg() -> RegionMetadata:
    # Fixed line and mobile ranges overlap on numbers starting with 8.
    return RegionMetadata(
        id="SG",
        calling_code="65",
        international_prefix=r"0[0-3]\d",
        categories={
            "general": CategoryPatterns(valid=r"[3689]\d{7}", possible=r"\d{8}"),
            "fixed_line": CategoryPatterns(valid=r"[68]\d{7}"),
            "mobile": CategoryPatterns(valid=r"[89]\d{7}"),
        },
    )


@pytest.fixture
def store() -> MetadataStore:
    return MetadataStore([make_us(), make_gb(), make_in(), make_sg()])


@pytest.fixture
def analyzer(store: MetadataStore) -> PhoneAnalyzer:
    return PhoneAnalyzer(store)


@pytest.fixture
def us_analyzer(store: MetadataStore) -> PhoneAnalyzer:
    return PhoneAnalyzer(store, default_region="US")


@pytest.fixture
def clean_settings():
    from numplan.core.settings import get_settings

    get_settings.cache_clear()
    get_analyzer.cache_clear()
    yield
    get_settings.cache_clear()
    get_analyzer.cache_clear()


@pytest.fixture
def us() -> RegionMetadata:
    return make_us()


@pytest.fixture
def gb() -> RegionMetadata:
    return make_gb()


@pytest.fixture
def india() -> RegionMetadata:
    return make_in()


@pytest.fixture
def sg() -> RegionMetadata:
    return make_sg()
