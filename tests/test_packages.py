import pytest

from helga.errors import HelgaError, PackagesDoNotMatchError
from helga.packages import HelmPackage, compare_semver, determine_newer_package


def test_from_dict_reads_aql_fields():
    data = {
        "repo": "helm-local",
        "path": "charts",
        "name": "nginx-1.2.3",
        "created": "2024-01-01T10:00:00Z",
        "modified": "2024-01-02T10:00:00Z",
    }
    pkg = HelmPackage.from_dict(data)
    assert pkg == HelmPackage("helm-local", "charts", "nginx-1.2.3",
                              "2024-01-01T10:00:00Z", "2024-01-02T10:00:00Z")


def test_name_and_version_splits_at_last_dash():
    assert HelmPackage(name="nginx-ingress-1.2.3").name_and_version() == ("nginx-ingress", "1.2.3")


def test_name_and_version_without_dash():
    assert HelmPackage(name="nginx").name_and_version() == ("", "nginx")


def test_name_and_version_empty_raises():
    with pytest.raises(HelgaError, match="name is invalid"):
        HelmPackage().name_and_version()


def test_semver_spec_precedence_order():
    ordered = [
        "v1.0.0-alpha",
        "v1.0.0-alpha.1",
        "v1.0.0-alpha.beta",
        "v1.0.0-beta",
        "v1.0.0-beta.2",
        "v1.0.0-beta.11",
        "v1.0.0-rc.1",
        "v1.0.0",
        "v2.0.0",
        "v2.1.0",
        "v2.1.1",
    ]
    pairs = list(zip(ordered, ordered[1:]))
    lower_first = [compare_semver(lower, higher) < 0 for lower, higher in pairs]
    higher_first = [compare_semver(higher, lower) > 0 for lower, higher in pairs]
    assert lower_first == [True] * len(pairs)
    assert higher_first == [True] * len(pairs)


@pytest.mark.parametrize(
    "a,b",
    [("v1.2.3", "v1.2.4"), ("v1.10.0", "v1.9.0"), ("v1.0.0-rc.1", "v1.0.0"), ("vbad", "v0.0.1")],
)
def test_compare_is_antisymmetric(a, b):
    assert compare_semver(a, b) == -compare_semver(b, a)
    assert compare_semver(a, b) != 0


@pytest.mark.parametrize(
    "a,b",
    [("v1", "v1.0.0"), ("v1.2", "v1.2.0"), ("v1.0.0+build.5", "v1.0.0"), ("vbad", "vworse")],
)
def test_compare_equal_versions(a, b):
    assert compare_semver(a, b) == 0


@pytest.mark.parametrize("invalid", ["1.0.0", "v01.0.0", "v1.0.0-01", "v1.2-pre", "v1.0.0.0", "v"])
def test_invalid_versions_are_older_than_valid(invalid):
    assert compare_semver(invalid, "v0.0.0") < 0


def test_newer_by_version():
    old = HelmPackage(name="nginx-1.2.3")
    new = HelmPackage(name="nginx-1.10.0")
    assert determine_newer_package(new, old, True) is new
    assert determine_newer_package(old, new, True) is new


def test_equal_versions_keep_second():
    a = HelmPackage(name="nginx-1.0.0")
    b = HelmPackage(name="nginx-1.0.0")
    assert determine_newer_package(a, b, True) is b


def test_names_must_match():
    with pytest.raises(PackagesDoNotMatchError, match="do not match"):
        determine_newer_package(HelmPackage(name="nginx-1.0.0"),
                                HelmPackage(name="redis-1.0.0"), True)


def test_newer_by_modification_time():
    earlier = HelmPackage(name="nginx-2.0.0", modified="2024-01-01T10:00:00Z")
    later = HelmPackage(name="nginx-1.0.0", modified="2024-03-01T10:00:00.123Z")
    assert determine_newer_package(later, earlier, False) is later


def test_time_mode_keeps_version_winner_when_not_later():
    higher = HelmPackage(name="nginx-2.0.0", modified="2024-01-01T10:00:00Z")
    lower = HelmPackage(name="nginx-1.0.0", modified="2024-03-01T10:00:00Z")
    assert determine_newer_package(higher, lower, False) is higher


def test_unparsable_time_is_oldest():
    parsed = HelmPackage(name="nginx-1.0.0", modified="2024-01-01T10:00:00+02:00")
    broken = HelmPackage(name="nginx-1.0.0", modified="yesterday")
    assert determine_newer_package(parsed, broken, False) is parsed
    assert determine_newer_package(broken, parsed, False) is parsed