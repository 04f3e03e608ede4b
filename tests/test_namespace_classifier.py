import copy

import pytest

from erd_styling.clustering.namespace_classifier import ClusteredEntity, MappingPathLookup, NamespaceClassifier
from erd_styling.clustering.ownership import OwnershipRegistry
from erd_styling.renderers.extension_points import Entity


OWNERS = {
    "app/models/account.rb": {"owner": "accounts-team"},
    "app/models/legacy.rb": {"owner": "UNOWNED"},
    "packs/billing/models/invoice.rb": {"owner": "billing-team"},
}

PATHS = {
    "Invoice": ["/app/packs/billing/models/invoice.rb", "/app/packs/other/models/invoice.rb"],
    "Account": "/app/app/models/account.rb",
    "Legacy": "/app/app/models/legacy.rb",
    "Version": "/gems/paper_trail-12.0.0/lib/paper_trail/version.rb",
    "Note": "/app/app/models/note.rb",
}


def make_classifier(paths=None, owners=None, **overrides):
    options = {
        "packages_roots": ["/app/packs"],
        "dependency_roots": ["/gems"],
        "project_root": "/app",
        "ownership": OwnershipRegistry(lambda: OWNERS if owners is None else owners),
    }
    options.update(overrides)
    return NamespaceClassifier(MappingPathLookup(PATHS if paths is None else paths), **options)


def test_package_root_example():
    classifier = make_classifier()
    assert classifier.classify_path("/app/packs/billing/models/invoice.rb") == "pack: billing"


def test_package_wins_over_ownership():
    assert make_classifier().namespace_for("Invoice") == "pack: billing"


def test_owner_when_no_package_match():
    assert make_classifier().namespace_for("Account") == "owner: accounts-team"


def test_unowned_owner_falls_through_to_default():
    assert make_classifier().namespace_for("Legacy") == "NO-PACK, NO-OWNER"


def test_external_library():
    assert make_classifier().namespace_for("Version") == "gem: paper_trail-12.0.0"


def test_ownership_wins_over_external_library():
    owners = {"/gems/paper_trail-12.0.0/lib/paper_trail/version.rb": {"owner": "platform"}}
    classifier = make_classifier(owners=owners, project_root="/nowhere")
    assert classifier.namespace_for("Version") == "owner: platform"


def test_default_label():
    assert make_classifier().namespace_for("Note") == "NO-PACK, NO-OWNER"


def test_missing_path_is_unknown():
    assert make_classifier().namespace_for("Ghost") == "unknown"


def test_unknown_does_not_consult_ownership():
    def provider():
        raise AssertionError("ownership should not be loaded")

    classifier = make_classifier(ownership=OwnershipRegistry(provider))
    assert classifier.namespace_for("Ghost") == "unknown"


def test_package_segment_must_be_a_directory():
    classifier = make_classifier()
    assert classifier.pack_name("/app/packs/readme.md") is None
    assert classifier.pack_name("/app/packs/billing/x.rb") == "billing"


def test_multiple_roots_are_checked_in_order():
    classifier = make_classifier(packages_roots=["/srv/components", "/app/packs/"])
    assert classifier.classify_path("/app/packs/billing/models/invoice.rb") == "pack: billing"
    assert classifier.classify_path("/srv/components/search/index.rb") == "pack: search"


def test_mapping_lookup_returns_first_path():
    lookup = MappingPathLookup(PATHS)
    assert lookup("Invoice") == "/app/packs/billing/models/invoice.rb"
    assert lookup("Account") == "/app/app/models/account.rb"
    assert lookup("Missing") is None
    assert MappingPathLookup({"Empty": []})("Empty") is None


def test_from_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("ERD_PACKAGES_ROOTS", '["/code/packs"]')
    monkeypatch.setenv("ERD_DEPENDENCY_ROOTS", '["/code/vendor"]')
    monkeypatch.setenv("ERD_PROJECT_ROOT", "/code")
    classifier = NamespaceClassifier.from_settings(
        lambda name: f"/code/vendor/{name}/lib/x.rb",
        ownership=OwnershipRegistry(),
    )
    assert classifier.namespace_for("rack") == "gem: rack"
    assert classifier.classify_path("/code/packs/auth/user.rb") == "pack: auth"


def test_entity_namespace_is_computed_once():
    paths = {"Account": "/app/app/models/account.rb"}
    calls = []

    def lookup(name):
        calls.append(name)
        return paths.get(name)

    classifier = NamespaceClassifier(
        lookup,
        packages_roots=["/app/packs"],
        dependency_roots=["/gems"],
        project_root="/app",
        ownership=OwnershipRegistry(lambda: OWNERS),
    )
    entity = ClusteredEntity(Entity("Account"), classifier)
    first = entity.namespace
    paths["Account"] = "/app/packs/billing/account.rb"
    assert entity.namespace == first == "owner: accounts-team"
    assert calls == ["Account"]
    assert ClusteredEntity(Entity("Account"), classifier).namespace == "pack: billing"


def test_clustered_entity_forwards_attributes():
    entity = ClusteredEntity(Entity("Account", attributes=[]), make_classifier())
    assert entity.name == "Account"
    assert entity.attributes == []
    with pytest.raises(AttributeError):
        entity.missing_attribute


def test_copied_clustered_entity_keeps_namespace():
    entity = ClusteredEntity(Entity("Invoice"), make_classifier())
    assert entity.namespace == "pack: billing"
    duplicate = copy.copy(entity)
    assert duplicate.namespace == "pack: billing"
    assert duplicate.name == "Invoice"


def test_private_names_are_not_forwarded():
    bare = ClusteredEntity.__new__(ClusteredEntity)
    with pytest.raises(AttributeError):
        bare._entity
