"""Package a Node.js project folder into a launcher executable."""

from __future__ import annotations

import os
import shutil
import stat
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from wnpkg.colors import green, red, yellow
from wnpkg.files import has_dir, make_dir, remove_tree

BUILD_DIR = "wnpkg-build"
CONFIG_NAME = "wnpkg_config"
DEFAULT_ICON = "*"

_WINDOWS_LAUNCHER = (
    "#include <stdlib.h>\n#include <stdio.h>\n\nint "
    'main(){\n\tsystem("source\\\\node.exe '
    'source\\\\index.js");\n\treturn 0;\n}'
)
_POSIX_LAUNCHER = (
    "#include <stdlib.h>\n#include <stdio.h>\n\nint "
    'main(){\n\tsystem("chmod +x source/node");\n\tsystem("./source/node '
    'source/index.js");\n\treturn 0;\n}'
)
_WINDOWS_NODE = Path("\\Program Files\\nodejs\\node.exe")


class BuildError(Exception):
    """Raised when a build step fails and the build cannot go on."""


@dataclass(frozen=True)
class Config:
    """Application settings read from the project's config file."""

    app_name: str
    icon: str

    @property
    def use_default_icon(self) -> bool:
        return self.icon == DEFAULT_ICON


def is_windows() -> bool:
    """Tell whether the current platform is Windows."""
    return sys.platform.startswith("win")


def have_program(name: str) -> bool:
    """Tell whether *name* can be found on the PATH."""
    return shutil.which(name) is not None


def _field(line: str, what: str) -> str:
    line = line.rstrip("\r\n")
    value, sep, _ = line.partition(";")
    if not sep:
        raise BuildError(f"Config {what} is missing its ';' terminator.")
    return value


def read_config(path: str | os.PathLike[str]) -> Config:
    """Read the app name and icon, each the text before ';' on its own line."""
    try:
        with open(path, encoding="utf-8") as fh:
            lines = fh.readlines()
    except OSError as exc:
        raise BuildError("Config file (wnpkg_config) not found.") from exc
    if len(lines) < 2:
        raise BuildError("Config file (wnpkg_config) needs an app name and an icon line.")
    return Config(_field(lines[0], "app name"), _field(lines[1], "icon"))


def launcher_source(windows: bool) -> str:
    """C source of the launcher that runs the bundled index.js with node."""
    return _WINDOWS_LAUNCHER if windows else _POSIX_LAUNCHER


def icon_resource(icon: str) -> str:
    """Contents of the resource script that embeds *icon*."""
    return f'1 ICON "wnpkg-build\\source\\{icon}"'


def compile_command(app_name: str, use_icon: bool, windows: bool) -> list[str]:
    """Compiler arguments that build the launcher executable."""
    cmd = ["gcc", f"{BUILD_DIR}/source/app.c"]
    if use_icon:
        cmd.append(f"{BUILD_DIR}/source/icon.o")
        if windows:
            cmd.append("-mwindows")
    if windows:
        cmd += ["-o", f"{BUILD_DIR}/{app_name}.exe", "-Wl,--subsystem,console"]
    else:
        cmd += ["-o", f"{BUILD_DIR}/{app_name}"]
    return cmd


def _log(message: str) -> None:
    print(yellow(f"[Log]: {message}\n"), end="")


def _run(cmd: Sequence[str]) -> bool:
    try:
        return subprocess.run(list(cmd), check=False).returncode == 0
    except OSError:
        return False


def _copy(src: Path, dst: Path, what: str) -> None:
    try:
        shutil.copyfile(src, dst)
    except OSError as exc:
        raise BuildError(
            f"Unable to move {what} file in target folder, file may not exist."
        ) from exc


def _make(path: Path, description: str) -> None:
    try:
        make_dir(path)
    except OSError as exc:
        raise BuildError(
            f"{description} may already exist or failed to create."
        ) from exc


def _add_icon(project: Path, source: Path, icon: str) -> None:
    _copy(project / icon, source / icon, "icon")
    _log("added app icon in source folder.")
    rc_path = source / "icon.rc"
    try:
        rc_path.write_text(icon_resource(icon), encoding="utf-8")
    except OSError as exc:
        raise BuildError("Writing icon file config in wnpkg-build failed.") from exc
    if not _run(["windres", str(rc_path), "-O", "coff", "-o", str(source / "icon.o")]):
        raise BuildError("Unable to add icon config file in target folder.")
    _log("added icon config in source folder.")


def _add_node(source: Path, windows: bool) -> None:
    name = "node.exe" if windows else "node"
    if windows:
        node = _WINDOWS_NODE
    else:
        found = shutil.which("node")
        if found is None:
            raise BuildError("node-js not installed, install it.")
        node = Path(found)
    target = source / name
    _copy(node, target, name)
    if not windows:
        target.chmod(target.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    _log(f"added {name} in source folder.")


def build(project: str | os.PathLike[str], windows: bool | None = None) -> Path:
    """Build the launcher for *project* into ./wnpkg-build and return its path."""
    if windows is None:
        windows = is_windows()
    project = Path(project)
    build_dir = Path(BUILD_DIR)
    source = build_dir / "source"

    _log("Making Builder folder...")
    remove_tree(build_dir)
    _log("Old builder folder (wnpkg-build) removed successfully.")
    _make(build_dir, "Builder folder (wnpkg-build)")
    _log("Builder folder (wnpkg-build) created successfully.")

    _log("Making Source folder...")
    _make(source, "Source folder (wnpkg-build/source)")
    _log("Source folder (wnpkg-build/source) created successfully.")

    _copy(project / "index.js", source / "index.js", "index.js")
    _log("added index.js in source folder.")
    _copy(project / "package.json", source / "package.json", "package.json")
    _log("added package.json in source folder.")

    modules = project / "node_modules"
    if has_dir(modules):
        try:
            shutil.copytree(modules, source / "node_modules", dirs_exist_ok=True)
        except OSError as exc:
            raise BuildError(
                "Unable to move node modules file in target folder, file may not exist."
            ) from exc
        _log("added node modules in source folder.")

    config = read_config(project / CONFIG_NAME)
    use_icon = not config.use_default_icon
    if use_icon:
        _add_icon(project, source, config.icon)
    else:
        _log("Default icon defined successfully.")

    try:
        (source / "app.c").write_text(launcher_source(windows), encoding="utf-8")
    except OSError as exc:
        raise BuildError("Writing app in wnpkg-build failed.") from exc
    _log("Application created successfully.")

    if _run(compile_command(config.app_name, use_icon, windows)):
        _log("added application executable in build folder.")
    else:
        print(red("[Error]: Unable to add application executable in build folder.\n"), end="")

    _add_node(source, windows)

    print(green("[Success]: Project compiled successfully.\n"), end="")
    suffix = ".exe" if windows else ""
    return build_dir / f"{config.app_name}{suffix}"


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: package the project folder given as first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Please provide project folder.")
        return 1
    try:
        build(args[0])
    except BuildError as exc:
        print(red(f"[Error]: {exc}\n"), end="")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())