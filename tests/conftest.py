"""Shared pytest fixtures for depguard tests."""

from __future__ import annotations

from pathlib import Path

import pytest

SDK_PROJECT = """<Project Sdk="Microsoft.NET.Sdk">
  <PropertyGroup>
    <TargetFramework>net8.0</TargetFramework>
  </PropertyGroup>
  <ItemGroup>
{items}
  </ItemGroup>
</Project>
"""


def render_project(*items: str) -> str:
    """Render an SDK-style project file with the given item lines."""
    return SDK_PROJECT.format(items="\n".join(f"    {item}" for item in items))


@pytest.fixture
def make_project(tmp_path: Path):
    """Write ``<name>.csproj`` plus a ``Program.cs`` and return the source path."""

    def _make(*items: str, name: str = "TestProject", directory: Path | None = None) -> Path:
        project_dir = directory or tmp_path
        project_dir.mkdir(parents=True, exist_ok=True)
        (project_dir / f"{name}.csproj").write_text(render_project(*items))
        source = project_dir / "Program.cs"
        source.write_text("public class TestClass { }\n")
        return source

    return _make


@pytest.fixture
def project_xml():
    """Return the :func:`render_project` helper."""
    return render_project
