# enumsrc

Small abstractions with no dependencies for getting the raw content that an
enum code generator parses. All of them live in `enumsrc.sources`.

Every source has the same two methods, described by the `Source` protocol:

- `content()` returns the full content as `bytes`.
- `filename()` returns a name for the source, for use in error messages.

## Files

```python
from enumsrc.sources import from_file

src = from_file("enums.go")
print(src.filename())   # "enums.go"
data = src.content()    # bytes
```

`from_file(path)` returns a `FileSource` that reads from the local disk.
`content()` checks the file's size first. A file larger than
`MAX_FILE_SIZE` (10 MiB) is refused. If the stat or the read fails, or the
file is too large, `content()` raises `ReadFileSourceError`. The error
message names the path. Where an underlying error caused it, that error is
chained as the cause.

## Custom file systems

`from_file_system(fs, path)` takes any object that has these two methods:

- `stat(path)`, which returns something with an `st_size` attribute.
- `read_file(path)`, which returns the bytes of the file.

`OSFileSystem` provides both methods using the operating system.
`FileSource` uses it when no file system is given.

```python
from enumsrc.sources import OSFileSystem, from_file_system

src = from_file_system(OSFileSystem(), "enums.go")
```

## Readers

`from_reader(reader)` returns a `ReaderSource` for any object that has a
`read()` method, such as `io.BytesIO`, `io.StringIO` or an open file.
`content()` reads the stream to its end. Text is encoded as UTF-8.
Reading uses up the stream. The name of a reader source is always
`"reader"`. If the read fails, `content()` raises `ReadSourceError`.

```python
import io
from enumsrc.sources import from_reader

src = from_reader(io.StringIO("package demo\n"))
print(src.filename())   # "reader"
print(src.content())    # b"package demo\n"
```

## What this package does not do

This package only obtains content. It does not parse enum definitions,
does not generate code, and provides no command-line tool.

## Tests

The test suite uses pytest. The `test` extra declares pytest as its
dependency.