import pytest

from cellpad.keymaps import (
    DEFAULT_BINDINGS,
    CommandKind,
    Direction,
    EditingCommand,
    KeyBinding,
    KeymapConflictError,
    KeyTable,
    Modifiers,
    NamedKey,
    load_default_table,
)


def make_binding(
    key: NamedKey = NamedKey.ESCAPE,
    command: EditingCommand | None = None,
) -> KeyBinding:
    return KeyBinding(key, command or EditingCommand(CommandKind.NOOP))


def test_default_table_covers_editing_keys() -> None:
    table = load_default_table()

    for key in (
        NamedKey.LEFT,
        NamedKey.RIGHT,
        NamedKey.UP,
        NamedKey.DOWN,
        NamedKey.HOME,
        NamedKey.END,
        NamedKey.PAGE_UP,
        NamedKey.PAGE_DOWN,
        NamedKey.BACKSPACE,
        NamedKey.DELETE,
        NamedKey.ENTER,
        NamedKey.TAB,
        NamedKey.ESCAPE,
        NamedKey.COPY,
        NamedKey.CUT,
        NamedKey.PASTE,
        NamedKey.SPACE,
    ):
        assert key in table
    assert len(table) == len(DEFAULT_BINDINGS)


def test_default_table_maps_all_function_keys() -> None:
    table = load_default_table()

    for number in range(1, 36):
        command = table.command_for(NamedKey(f"f{number}"), Modifiers())
        assert command is not None
        assert command.kind is CommandKind.FUNCTION
        assert command.number == number


def test_default_table_skips_modifiers_and_platform_keys() -> None:
    table = load_default_table()

    assert NamedKey.CTRL not in table
    assert NamedKey.SHIFT not in table
    assert table.lookup(NamedKey.MEDIA_PLAY_PAUSE) is None
    assert table.command_for(NamedKey.VOLUME_UP, Modifiers()) is None


def test_command_for_attaches_modifier_snapshot() -> None:
    table = load_default_table()
    mods = Modifiers(ctrl=True, shift=True)

    command = table.command_for(NamedKey.LEFT, mods)

    assert command == EditingCommand.move(Direction.LEFT, mods)


def test_space_inserts_a_space() -> None:
    command = load_default_table().command_for(NamedKey.SPACE, Modifiers())

    assert command is not None
    assert command.kind is CommandKind.INSERT_CHAR
    assert command.char == " "


def test_duplicate_binding_conflicts() -> None:
    with pytest.raises(KeymapConflictError):
        KeyTable([make_binding(), make_binding()])


def test_modifier_binding_conflicts() -> None:
    with pytest.raises(KeymapConflictError) as excinfo:
        KeyTable([make_binding(NamedKey.CTRL)])

    assert excinfo.value.key is NamedKey.CTRL


def test_with_overrides_replaces_entries_without_mutating() -> None:
    table = load_default_table()
    override = make_binding(NamedKey.ESCAPE, EditingCommand(CommandKind.NOOP))

    updated = table.with_overrides([override])

    assert updated.lookup(NamedKey.ESCAPE) == override
    escape = table.lookup(NamedKey.ESCAPE)
    assert escape is not None
    assert escape.command.kind is CommandKind.ESCAPE
    assert len(updated) == len(table)


def test_with_overrides_can_add_platform_keys() -> None:
    table = load_default_table(
        overrides=[make_binding(NamedKey.INSERT, EditingCommand(CommandKind.PASTE))]
    )

    command = table.command_for(NamedKey.INSERT, Modifiers(shift=True))

    assert command is not None
    assert command.kind is CommandKind.PASTE
    assert command.modifiers.shift is True


def test_binding_templates_reject_modifiers() -> None:
    with pytest.raises(ValueError):
        KeyBinding(
            NamedKey.LEFT,
            EditingCommand.move(Direction.LEFT, Modifiers(ctrl=True)),
        )


def test_command_validation() -> None:
    with pytest.raises(ValueError):
        EditingCommand(CommandKind.MOVE_CURSOR)
    with pytest.raises(ValueError):
        EditingCommand(CommandKind.INSERT_CHAR)
    with pytest.raises(ValueError):
        EditingCommand(CommandKind.FUNCTION)


def test_command_label() -> None:
    command = EditingCommand.move(Direction.LEFT, Modifiers(ctrl=True, shift=True))

    assert command.label == "move_cursor:left:ctrl+shift"
    assert EditingCommand(CommandKind.COPY).label == "copy"
