# wnpkg

`wnpkg` packages a Node.js project into a `wnpkg-build` folder that holds a
small native launcher executable and what it needs to run the project:
`index.js`, `package.json`, `node_modules` (when the project has one) and a
copy of the `node` binary.

## Requirements

- Python 3.10 or later
- `gcc` on the `PATH` (the launcher is compiled from generated C source)
- Node.js installed: on POSIX systems `node` must be on the `PATH`; on
  Windows it is taken from `\Program Files\nodejs\node.exe`
- `windres` on the `PATH` if you ask for a custom icon

## Installation

```
pip install .
```

## Preparing a project

The project folder must contain:

- `index.js`
- `package.json`
- `wnpkg_config`

and may contain a `node_modules/` folder, which is copied along with it.

`wnpkg_config` has two lines, each ending with `;`. The first is the name of
the executable, the second is the icon file to embed (a file inside the
project folder), or `*` for the default icon:

```
my_app;
*;
```

A missing config file, fewer than two lines, or a line without its `;`
stops the build with an error.

## Building

Run the command from the folder where `wnpkg-build` should be created:

```
wnpkg path/to/my_project
```

The same is available as `python -m wnpkg.cli path/to/my_project`.

Any existing `wnpkg-build` folder is removed first. On success the folder
contains:

```
wnpkg-build/
    my_app            (my_app.exe on Windows)
    source/
        app.c
        index.js
        package.json
        node_modules/ (if the project has one)
        node          (node.exe on Windows)
        icon.rc, icon.o and the icon file (only with a custom icon)
```

Start the packaged application from inside `wnpkg-build`:

```
cd wnpkg-build
./my_app
```

Progress is written in colour. A failing step prints an error and the
command exits with status 1; the one exception is a failed `gcc` run, which
is reported but does not stop the remaining steps. Without a project folder
argument the command prints `Please provide project folder.` and exits
with status 1.

## Using it from Python

```python
from wnpkg.cli import BuildError, build, compile_command, read_config

config = read_config("path/to/my_project/wnpkg_config")
print(config.app_name, config.icon, config.use_default_icon)

print(compile_command(config.app_name, use_icon=False, windows=False))
# ['gcc', 'wnpkg-build/source/app.c', '-o', 'wnpkg-build/my_app']

try:
    executable = build("path/to/my_project")
    print("built", executable)
except BuildError as err:
    print(err)
```

`build(project, windows=None)` detects the platform with `is_windows()`
when `windows` is not given, and returns the path of the executable it
tried to build. `launcher_source(windows)` and `icon_resource(icon)` return
the generated C source and resource script; `have_program(name)` tells
whether a program is on the `PATH`.

`wnpkg.files` holds the directory helpers the build uses: `make_dir`,
`remove_dir`, `has_dir`, `list_dir` (returning `DirEntry` items with a
`FileType`) and `remove_tree`. `wnpkg.colors` holds the ANSI colour helpers
`colorize`, `red`, `green` and `yellow`, and the `Color` enum.

## What it does not do

`wnpkg` does not bundle Node.js into a single file: the executable is a
launcher that runs `source/node source/index.js` relative to the current
folder, so it must be started from inside `wnpkg-build`, with the `source`
folder next to it.