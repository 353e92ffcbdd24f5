import io

from pathkit.utils.console import THEMES, ConsoleManager, StatusType


class TestConsoleManager:
    def test_unknown_theme_falls_back(self):
        console = ConsoleManager(theme="neon", file=io.StringIO())
        assert console.theme_name == "manhattan"
        assert console.theme_colors is THEMES["manhattan"]

    def test_status_lines(self):
        buffer = io.StringIO()
        console = ConsoleManager(theme="sunset", file=buffer)
        console.print_error("broken")
        output = buffer.getvalue()
        assert "[x] broken" in output

    def test_status_types(self):
        assert StatusType.WARNING.value[0] == "[!]"

    def test_components_table(self):
        buffer = io.StringIO()
        console = ConsoleManager(file=buffer)
        console.print_components("C:\\a.txt", [("drive", "C:"), ("extension", ".txt")])
        output = buffer.getvalue()
        assert "'C:'" in output
        assert "'.txt'" in output
