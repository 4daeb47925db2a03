import pytest

from netpkgtools.versions import (
    PackageFields,
    compare_packages,
    parse_package,
    serialize_build,
    serialize_version,
)


def test_parse_package_extracts_fields():
    name = "xfce4-panel-4.6.1-i486-2.txz"
    assert parse_package(name) == PackageFields(name, "4.6.1", "2")


@pytest.mark.parametrize("suffix", ["tgz", "tlz", "txz"])
def test_parse_package_accepts_archive_suffixes(suffix):
    fields = parse_package(f"foo-1.0-noarch-7.{suffix}")
    assert (fields.version, fields.build) == ("1.0", "7")


@pytest.mark.parametrize(
    "name",
    ["README", "foo-1.0-i486-1.tar.gz", "foo-1.0-1.txz", "foo-1.0-i486-1.txz.bak"],
)
def test_parse_package_rejects_other_names(name):
    with pytest.raises(ValueError):
        parse_package(name)


def test_keys_of_parsed_fields_match_serializers():
    fields = parse_package("foo-2.3rc1-i486-4.txz")
    assert fields.version_key == serialize_version("2.3rc1")
    assert fields.build_key == serialize_build("4")


@pytest.mark.parametrize("version", ["1", "1.2.3", "2.0rc1", "0.9_beta2", "20240101"])
def test_version_key_has_fixed_length(version):
    assert len(serialize_version(version)) == 128


@pytest.mark.parametrize("build", ["1", "2_slack", "1z3", "007"])
def test_build_key_has_fixed_length(build):
    assert len(serialize_build(build)) == 64


def test_version_key_layout():
    assert serialize_version("1.2") == "00000001" + "00000002" + "0" * 110 + "55"


def test_build_key_layout():
    assert serialize_build("3") == "0" * 7 + "3" + "0" * 56


@pytest.mark.parametrize(
    "first, second",
    [("1.0", "1"), ("01.2", "1.2"), ("1.0RC1", "1.0rc1"), ("2_1", "2.1")],
)
def test_equivalent_versions_share_a_key(first, second):
    assert serialize_version(first) == serialize_version(second)


@pytest.mark.parametrize(
    "older, newer",
    [
        ("1.9", "1.10"),
        ("1.99", "2.0"),
        ("1.0rc1", "1.0"),
        ("1.0alpha", "1.0beta"),
        ("1.0beta", "1.0pre"),
        ("1.0pre", "1.0rc"),
        ("1.0cvs", "1.0alpha1"),
        ("1.0rc1", "1.0rc2"),
        ("1.0", "1.0a"),
        ("1.0a", "1.0b"),
        ("0.5", "5"),
    ],
)
def test_version_keys_order(older, newer):
    assert serialize_version(older) < serialize_version(newer)


@pytest.mark.parametrize("older, newer", [("1", "2"), ("9", "10"), ("1", "1_1")])
def test_build_keys_order(older, newer):
    assert serialize_build(older) < serialize_build(newer)


def test_build_z_separates_like_dot():
    assert serialize_build("1z2") == serialize_build("1.2")


def test_compare_same_package():
    assert compare_packages("foo-1.0-i486-1.txz", "foo-1.0-x86_64-1.tgz") == 0


def test_compare_version_outweighs_build():
    assert compare_packages("foo-1.1-i486-1.txz", "foo-1.0-i486-9.txz") == 1
    assert compare_packages("foo-1.0-i486-9.txz", "foo-1.1-i486-1.txz") == -1


def test_compare_build_when_versions_equal():
    assert compare_packages("foo-1.0-i486-2.txz", "foo-1.0-i486-1.txz") == 1
    assert compare_packages("foo-1.0-i486-1.txz", "foo-1.0-i486-2.txz") == -1


@pytest.mark.parametrize(
    "first, second",
    [
        ("a-1.2-i486-1.txz", "a-1.10-i486-1.txz"),
        ("a-2.0rc1-i486-1.txz", "a-2.0-i486-1.txz"),
        ("a-3-i486-1.txz", "a-3-i486-1.txz"),
    ],
)
def test_compare_is_antisymmetric(first, second):
    assert compare_packages(first, second) == -compare_packages(second, first)


def test_compare_rejects_bad_names():
    with pytest.raises(ValueError):
        compare_packages("foo-1.0-i486-1.txz", "junk")