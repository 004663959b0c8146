"""Tests for archive packaging and the exporter."""

import io
import json
import zipfile

import pytest

from pagecraft.codegen import ExportOptions
from pagecraft.errors import ExportError
from pagecraft.export import ArchiveExporter, DirectorySink, archive_filename, build_archive
from pagecraft.stores import EditorState, ThemeStore
from pagecraft.tree import GlobalCustomCode


class MemorySink:
    """Collects saved archives instead of writing them."""

    def __init__(self):
        self.saved = {}

    def __call__(self, filename, data):
        self.saved[filename] = data
        return f"memory://{filename}"


def archive_names(data):
    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        return set(archive.namelist())


def archive_text(data, name):
    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        return archive.read(name).decode("utf-8")


class TestBuildArchive:
    """Test ZIP serialization."""

    def test_contents_and_compression(self):
        data = build_archive({"index.html": "<p>Hi</p>", "styles.css": "p {}"})
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            assert archive.namelist() == ["index.html", "styles.css"]
            assert archive.read("index.html") == b"<p>Hi</p>"
            assert all(info.compress_type == zipfile.ZIP_DEFLATED for info in archive.infolist())

    def test_deterministic(self):
        files = {"index.html": "<p>Hi</p>", "styles.css": "p {}"}
        assert build_archive(files) == build_archive(dict(files))

    def test_utf8_content(self):
        data = build_archive({"index.html": "© 🚀"})
        assert archive_text(data, "index.html") == "© 🚀"


class TestArchiveFilename:
    """Test filename derivation."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("My Site", "my-site.zip"),
            ("  Big   Launch\tPage ", "-big-launch-page-.zip"),
            ("portfolio", "portfolio.zip"),
        ],
    )
    def test_slug(self, name, expected):
        assert archive_filename(name) == expected


class TestArchiveExporter:
    """Test export_project end to end."""

    @pytest.mark.asyncio
    async def test_minimal_export(self, minimal_tree):
        sink = MemorySink()
        result = await ArchiveExporter(save_as=sink).export_project(minimal_tree, "My Site")
        assert result.filename == "my-site.zip"
        assert result.location == "memory://my-site.zip"
        assert archive_names(sink.saved["my-site.zip"]) == {"index.html", "styles.css"}

    @pytest.mark.asyncio
    async def test_archive_holds_generated_site(self, minimal_tree):
        sink = MemorySink()
        result = await ArchiveExporter(save_as=sink).export_project(minimal_tree, "Site")
        index = archive_text(result.data, "index.html")
        styles = archive_text(result.data, "styles.css")
        assert index.startswith("<!DOCTYPE html>")
        assert '<p class="c-a1" id="a1">Hi</p>' in index
        assert "#a1 {\n  color: red;\n}" in styles

    @pytest.mark.asyncio
    async def test_netlify_scaffolding(self, minimal_tree):
        sink = MemorySink()
        options = ExportOptions(include_config=True, platform="netlify")
        result = await ArchiveExporter(save_as=sink).export_project(minimal_tree, "Shop", options)
        names = archive_names(result.data)
        assert names == {"index.html", "styles.css", "package.json", "README.md", ".gitignore", "netlify.toml"}
        assert "vercel.json" not in names

    @pytest.mark.asyncio
    async def test_vercel_scaffolding(self, minimal_tree):
        options = ExportOptions(includeConfig=True, platform="vercel")
        result = await ArchiveExporter(save_as=MemorySink()).export_project(minimal_tree, "Shop", options)
        names = archive_names(result.data)
        assert "vercel.json" in names
        assert "netlify.toml" not in names
        assert json.loads(archive_text(result.data, "vercel.json"))["builds"][0]["use"] == "@vercel/static"

    @pytest.mark.asyncio
    async def test_static_adds_no_descriptor(self, minimal_tree):
        options = ExportOptions(include_config=True, platform="static")
        result = await ArchiveExporter(save_as=MemorySink()).export_project(minimal_tree, "Shop", options)
        assert archive_names(result.data) == {"index.html", "styles.css", "package.json", "README.md", ".gitignore"}

    @pytest.mark.asyncio
    async def test_platform_ignored_without_config(self, minimal_tree):
        options = ExportOptions(platform="netlify")
        result = await ArchiveExporter(save_as=MemorySink()).export_project(minimal_tree, "Shop", options)
        assert archive_names(result.data) == {"index.html", "styles.css"}

    @pytest.mark.asyncio
    async def test_theme_from_store_when_requested(self, minimal_tree):
        exporter = ArchiveExporter(theme_provider=ThemeStore("dark"), save_as=MemorySink())
        themed = await exporter.export_project(minimal_tree, "Dark", ExportOptions(include_theme=True))
        plain = await exporter.export_project(minimal_tree, "Dark", ExportOptions())
        assert "--color-background: #0f172a;" in archive_text(themed.data, "styles.css")
        assert ":root" not in archive_text(plain.data, "styles.css")

    @pytest.mark.asyncio
    async def test_global_code_from_editor_state(self, minimal_tree):
        editor = EditorState(GlobalCustomCode(javascript="boot();", headHTML='<meta name="x" content="y">'))
        exporter = ArchiveExporter(editor_provider=editor, save_as=MemorySink())
        result = await exporter.export_project(minimal_tree, "Globals")
        index = archive_text(result.data, "index.html")
        assert "boot();" in index
        assert '<meta name="x" content="y" />' in index

    @pytest.mark.asyncio
    async def test_explicit_options_win_over_stores(self, minimal_tree):
        exporter = ArchiveExporter(
            theme_provider=ThemeStore("dark"),
            editor_provider=EditorState(GlobalCustomCode(css="body { color: red; }")),
            save_as=MemorySink(),
        )
        options = ExportOptions(
            include_theme=True,
            theme_variables={"--brand": "teal"},
            global_custom_code=GlobalCustomCode(css="body { color: blue; }"),
        )
        result = await exporter.export_project(minimal_tree, "Explicit", options)
        styles = archive_text(result.data, "styles.css")
        assert "--brand: teal;" in styles
        assert "--color-background" not in styles
        assert "color: blue;" in styles
        assert "body { color: red; }" not in styles
        assert "body {\n  color: red;" not in styles

    @pytest.mark.asyncio
    async def test_directory_sink(self, minimal_tree, tmp_path):
        exporter = ArchiveExporter(save_as=DirectorySink(tmp_path / "dist"))
        result = await exporter.export_project(minimal_tree, "On Disk")
        assert result.location == tmp_path / "dist" / "on-disk.zip"
        assert result.location.read_bytes() == result.data

    @pytest.mark.asyncio
    async def test_async_sink_is_awaited(self, minimal_tree):
        saved = []

        async def upload(filename, data):
            saved.append(filename)
            return "uploaded"

        result = await ArchiveExporter(save_as=upload).export_project(minimal_tree, "Async")
        assert saved == ["async.zip"]
        assert result.location == "uploaded"

    @pytest.mark.asyncio
    async def test_sink_failure_wrapped_with_cause(self, minimal_tree):
        def broken(filename, data):
            raise OSError("disk full")

        with pytest.raises(ExportError) as exc_info:
            await ArchiveExporter(save_as=broken).export_project(minimal_tree, "Broken")
        assert str(exc_info.value) == "Failed to export project: disk full"
        assert isinstance(exc_info.value.__cause__, OSError)
        assert exc_info.value.code == "EXPORT_FAILED"

    @pytest.mark.asyncio
    async def test_provider_failure_wrapped(self, minimal_tree):
        class FailingTheme:
            @property
            def css_variables(self):
                raise RuntimeError("store unavailable")

        exporter = ArchiveExporter(theme_provider=FailingTheme(), save_as=MemorySink())
        with pytest.raises(ExportError) as exc_info:
            await exporter.export_project(minimal_tree, "Broken", ExportOptions(include_theme=True))
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_repeated_exports_identical(self, page_tree):
        exporter = ArchiveExporter(save_as=MemorySink())
        options = ExportOptions(include_config=True, platform="netlify")
        first = await exporter.export_project(page_tree, "Landing", options)
        second = await exporter.export_project(page_tree, "Landing", options)
        assert first.data == second.data
