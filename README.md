# wintergen

`wintergen` walks a source tree of annotated C++ headers, mirrors it into a
target directory and injects generated code into the headers:

- **Reflection** (`wintergen.reflection_pass.ReflectionPass`): classes whose
  base list names `Reflect` or `Entity` get a field table, `getField`,
  `getDeclaredFields`, `getClassSize`, `getInstance`, `clone` and
  `initializeReflection`. After all files, `Reflect.cpp` is written into the
  target directory with `Reflect::initializeClassMap()` and
  `Reflect::initializeReflection()`.
- **Components** (`wintergen.component_pass.ComponentPass`): classes whose
  base list names `Component` or `Repository` get a `_componentId_` member.
  After all files, `Component.cpp` is written with
  `Component::initializeComponents()`, creating one instance of each.
- **Annotations** (`wintergen.annotation_pass.AnnotationPass`):
  `$RestController`, endpoint markers such as `$GET("/path")`,
  `$PostConstruct`, `$Autowired` and `$Column("name")` become endpoint
  registration, a post-construct call, an autowired member initialised from
  the component registry, and a column-mapping table. The generated code is
  written just before the class's closing brace. `Router.cpp` in the target
  directory is truncated to an empty file at the end.

The passes run only on files ending in `.h` or `.hpp`. Every file is copied
line by line; each non-empty line that no pass consumed is written preceded by
a `#line N "file"` directive, so compiler messages point at the original
source. Empty lines are dropped.

## Installation

```
pip install .
```

## Command line

Generate code from a source directory into a target directory:

```
wintergen app/source build/generated
```

The target directory is created if it does not exist. Entries are visited in
name order, each directory before its contents. The command returns `-1`
when not given exactly two arguments or when a file cannot be opened.

To remove a generated directory (one character is read from standard input;
`y` or `Y` confirms):

```
wintergen clean build/generated
```

## Library use

```python
from pathlib import Path

from wintergen.annotation_pass import AnnotationPass
from wintergen.cli import process_file
from wintergen.component_pass import ComponentPass
from wintergen.preprocessor import PreProcessor
from wintergen.reflection_pass import ReflectionPass

source, target = "app/source", "build/generated"
Path(target).mkdir(parents=True, exist_ok=True)

pre = PreProcessor()
pre.add_pass(ReflectionPass(source, target))
pre.add_pass(AnnotationPass(source, target))
pre.add_pass(ComponentPass(source, target))

for path in sorted(Path(source).rglob("*")):
    process_file(pre, path, source, target)
pre.finish()
```

Custom passes subclass `wintergen.pass_base.Pass` and implement `begin`,
`process` (return `True` to consume a line), `end` and
`processing_finished`; `should_process` defaults to header files.

## Runtime helpers

The package also carries the helpers the generated code is built around:

- `wintergen.string_utils`: trimming, splitting of JSON-like arrays
  (`split_array`, `split_object_array`), case conversion, `to_camel_case`,
  `parse_boolean`, `url_decode`, `get_field_name` and more.
- `wintergen.field_types`: `FieldType`, `JsonFieldType`,
  `convert_to_field_type`, `get_json_field_type`, `are_types_compatible`.
- `wintergen.tsqueue.TsQueue`: a thread-safe deque with `wait_for_event` and
  `wait_until_at_most`.
- `wintergen.loggy`: `format_message` with `{}` placeholders and the
  `Loggy` logger, which writes queued messages to every added stream from a
  background thread; `flush()` writes what is queued.
- `wintergen.thread_pool.ThreadPool`: a fixed worker pool, usable as a
  context manager.
- `wintergen.statement.Statement`: queries with `:name` parameters bound by
  `set_int`, `set_string`, `set_bool`, `set_null` and the like;
  `build_query` raises `UnboundParameterError` for a missing parameter.
- `wintergen.db_pool`: the abstract `DbConnection` and a `DbConnectionPool`
  that grows up to a maximum and raises `PoolExhaustedError` beyond it;
  `connection()` lends one for a `with` block.
- `wintergen.component.Component`: a registry of component instances looked
  up by id.

## What it does not do

`Statement` and `DbConnection` are abstract: the package contains no
database driver and cannot talk to a database by itself. It also contains no
HTTP server or request router; the endpoint code it generates is C++ for the
application being built, not something `wintergen` runs.

## Tests

```
pip install .[test]
pytest
```