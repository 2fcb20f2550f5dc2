"""Verify every module imports cleanly with no errors."""


def test_import_boardkeys():
    import boardkeys  # noqa: F401


def test_import_keys():
    import boardkeys.keys  # noqa: F401


def test_import_keys_generate():
    import boardkeys.keys.generate  # noqa: F401


def test_import_keys_migrate():
    import boardkeys.keys.migrate  # noqa: F401


def test_import_groups():
    import boardkeys.groups  # noqa: F401


def test_import_groups_slots():
    import boardkeys.groups.slots  # noqa: F401


def test_import_board():
    import boardkeys.board  # noqa: F401


def test_import_cli():
    import boardkeys.cli  # noqa: F401


def test_import_defaults():
    import boardkeys.defaults  # noqa: F401


def test_import_output():
    import boardkeys.output  # noqa: F401


def test_keys_has_no_group_dependency():
    import boardkeys.keys as keys

    assert "Item" not in keys.__all__
