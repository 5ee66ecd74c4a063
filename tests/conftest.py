"""Pytest configuration and fixtures."""
import pytest

from shellaudit.parsers import ShellParser


@pytest.fixture
def shell_parser():
    """Create a shell parser instance."""
    return ShellParser()


@pytest.fixture
def scripts_dir(tmp_path):
    """Create a small tree of build scripts."""
    root = tmp_path / "scripts"
    (root / "nested").mkdir(parents=True)

    (root / "base.sh").write_text(
        "#!/bin/bash\n"
        "ctr=$(buildah from fedora)\n"
        "buildah run $ctr dnf install -y nginx\n"
    )
    (root / "nested" / "push.sh").write_text("buildah push myimage docker://registry/myimage\n")
    (root / "README.md").write_text("buildah from ignored\n")

    return root
