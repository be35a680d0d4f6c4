from sceneforge.console import (
    HELP_LINES,
    Console,
    LogEntry,
    LogLevel,
    StatOverlay,
    get_console,
)


def test_stat_fps_and_none():
    overlay = StatOverlay()
    overlay.toggle_stat("stat fps")
    assert (overlay.show_fps, overlay.show_memory, overlay.show_render) == (True, False, True)
    overlay.toggle_stat("stat memory")
    assert overlay.show_memory is True
    overlay.toggle_stat("stat none")
    assert (overlay.show_fps, overlay.show_memory, overlay.show_render) == (False, False, False)


def test_unrecognised_stat_changes_nothing():
    overlay = StatOverlay()
    overlay.toggle_stat("stat gpu")
    assert overlay == StatOverlay()


def test_add_log_and_clear():
    console = Console()
    console.add_log(LogLevel.WARNING, "careful")
    assert console.items == [LogEntry(LogLevel.WARNING, "careful")]
    assert console.scroll_to_bottom is True
    console.clear()
    assert console.items == []


def test_add_log_truncates_long_messages():
    console = Console()
    console.add_log(LogLevel.DISPLAY, "x" * 5000)
    assert len(console.items[0].message) == 1023


def test_help_command():
    console = Console()
    console.execute_command("help")
    messages = [entry.message for entry in console.items]
    assert messages[0] == "Executing command: help"
    assert tuple(messages[1:]) == HELP_LINES


def test_unknown_command_logs_error():
    console = Console()
    console.execute_command("jump")
    assert console.items[-1] == LogEntry(LogLevel.ERROR, "Unknown command: jump")


def test_clear_command_removes_everything():
    console = Console()
    console.add_log(LogLevel.DISPLAY, "old")
    console.execute_command("clear")
    assert console.items == []


def test_stat_command_reaches_overlay():
    console = Console()
    console.execute_command("stat memory")
    assert console.overlay.show_memory is True
    assert console.overlay.show_render is True


def test_submit_records_history():
    console = Console()
    console.history_pos = 3
    console.submit("help")
    assert console.items[0].message == ">> help"
    assert console.items[1].message == "Executing command: help"
    assert console.history == ["help"]
    assert console.history_pos == -1


def test_submit_empty_does_nothing():
    console = Console()
    console.submit("")
    assert console.items == []
    assert console.history == []


def test_toggle_flips_open_state():
    console = Console()
    assert console.is_open is True
    console.toggle()
    assert console.is_open is False
    console.toggle()
    assert console.is_open is True


def test_visible_entries_level_switches():
    console = Console()
    console.add_log(LogLevel.DISPLAY, "a")
    console.add_log(LogLevel.WARNING, "b")
    console.add_log(LogLevel.ERROR, "c")
    console.show_warning = False
    assert [e.message for e in console.visible_entries()] == ["a", "c"]


def test_visible_entries_text_filter():
    console = Console()
    console.add_log(LogLevel.DISPLAY, "Texture loaded")
    console.add_log(LogLevel.DISPLAY, "Mesh loaded")
    console.add_log(LogLevel.ERROR, "Texture missing")
    console.filter_text = "texture"
    assert [e.message for e in console.visible_entries()] == ["Texture loaded", "Texture missing"]
    console.filter_text = "-missing"
    assert [e.message for e in console.visible_entries()] == ["Texture loaded", "Mesh loaded"]
    console.filter_text = "mesh, -texture"
    assert [e.message for e in console.visible_entries()] == ["Mesh loaded"]


def test_get_console_is_shared():
    get_console().add_log(LogLevel.WARNING, "shared console probe")
    assert get_console().items[-1] == LogEntry(LogLevel.WARNING, "shared console probe")