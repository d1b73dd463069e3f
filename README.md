# qgitcore

The view-independent core of a graphical Git history browser, as a plain
Python library with no third-party dependencies.

## What it provides

- `qgitcore.patch`: classify diff lines for highlighting (`classify_line`,
  `LineStyle`), filter a patch to added or removed lines only while mapping
  the reader's line position (`filter_lines`, `PatchFilter`, `next_filter`),
  find case-insensitive highlight matches as paragraph/column selections
  (`compute_matches`, `get_match`, `MatchSelection`), shorten commit
  subjects for captions (`short_caption`), and accumulate diff output as it
  streams in (`PatchContent`, with `feed`, `finish`, `cycle_filter`,
  `set_highlight`, `match_for` and `find_target`).
- `qgitcore.ranges`: order branch and tag names newest first with release
  candidates after their releases (`order_refs`), build the grouped ref
  choices with a default entry (`default_ref_list`, `ref_choices`), and
  build the arguments for `git log` (`build_range`, `toggle_all_option`).
- `qgitcore.tree`: a lazily expanded repository file tree (`FileTree`,
  `FileItem`, `DirItem`) that marks files and directories modified in the
  working directory.
- `qgitcore.settings`: a key/value store kept in a JSON file or in memory,
  with bit flags (`SettingsStore`, `Flag`); a tree built from
  `section.key=value` lines (`build_config_tree`, `ConfigNode`); user
  identity sources (`parse_user_info`, `default_user_index`, `UserSource`);
  and text codec choices (`codec_list`, `find_codec_index`, `codec_name`).
- `qgitcore.smartbrowse`: the wheel-inertia logic that turns repeated rolls
  past the top or bottom of a pane into Up/Down/Log/Diff navigation
  (`SmartBrowse`, `Link`, `visibility_flags`, `switch_links`,
  `link_target`).
- `qgitcore.textutil`: splitting streamed byte output into whole lines
  (`ParagraphBuffer`) and small file helpers (`write_text_file`,
  `write_bytes_file`, `read_text_file`).
- `qgitcore.constants`: well-known SHAs, settings keys and defaults, icon
  names for files by full name or extension (`mime_icon`), the fast SHA
  hash (`sha_hash`) and a check for links holding a full SHA
  (`is_sha_link`).

## Installing

```
pip install .
```

## Example

```python
from qgitcore.ranges import order_refs, build_range

order_refs(["v1.5", "v1.5-rc1", "v1.5.1"])
# ['v1.5.1', 'v1.5', 'v1.5-rc1']

build_range("v1.5", "HEAD", "-r")
# '-r v1.5..HEAD'

build_range("v1.5", "HEAD", "-- kernel/")
# 'v1.5..HEAD -- kernel/'
```

## Command line

```
qgitcore --help
qgitcore --version
qgitcore --no-merges v2.6.18..
```

`--help` (also `-h`, `-?`, `--help-all`) prints usage and `--version`
(also `-v`) prints the version. Every other argument is collected as an
argument meant for `git log` and printed back, one per line, as
`Git log argument: <arg>`.

## What it does not do

The package has no graphical interface and does not run `git` itself.
Diff output, tree listings, ref names and config lines must be obtained by
the caller and passed in; the command line only reports the arguments it
would hand to `git log`.

## Running the tests

```
pip install .[test]
pytest
```