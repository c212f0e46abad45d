# minirt

Building blocks for a small ray tracer: scene description types, plus text,
number, linked-list and line-reading helpers useful when loading scene files.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `minirt.scene_types`: the dataclasses `Rgba` (channels checked to lie in
  0..255), `Vec3`, `AmbientLight`, `Camera`, `FocalLight`, `Sphere` (with a
  `radius` property), `Plane`, `Cylinder`, `Ray` and `Scene`, and the
  `ElementType` and `ElementToParse` enums. `Scene` keeps lists of cameras,
  lights and elements and reports `camera_count`, `lights_count`,
  `element_count` and `element_types`. The constants `WIN_WIDTH`,
  `WIN_HEIGHT` and `DEG_TO_RAD` are defined here too.
- `minirt.chars`: ASCII classification and case helpers that accept a
  one-character string or an integer code: `is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`.
- `minirt.numbers`: lenient number parsing and formatting.
  `atoi` reads a leading integer (0 if none), `atoi_at` does the same from
  a position and also returns where it stopped, `atof` reads an unsigned
  decimal such as `12` or `0.25`, and `itoa` formats an integer.
- `minirt.strings`: `split` (drops empty pieces), `substr`, `strtrim`,
  `strjoin` and `join_all` (which treat `None` as missing), `strmapi`, and
  `striteri` (which edits a mutable sequence of characters in place).
- `minirt.search`: `strnstr`, `strchr`, `strrchr`, `strncmp`, `strlcpy`,
  `strlcat`, `len_to_char`, `starts_with_key`, `memchr`, `memcmp`.
  Searches return an index or `None`; the bounded copies return the new
  text together with the length the full result would have.
- `minirt.linked_list`: `Node` and `LinkedList`, with `push_front`,
  `push_back`, `last`, `clear`, `for_each`, `map`, `len()` and iteration.
- `minirt.line_reader`: `LineReader` and `read_lines` for reading a text or
  binary stream line by line through a fixed-size buffer, keeping each
  line's newline.

## Example

```python
import io

from minirt.line_reader import read_lines
from minirt.numbers import atof
from minirt.strings import split

scene_text = io.StringIO("sp 0,0,20.6 12.6 10,0,255\n")
for line in read_lines(scene_text):
    tokens = split(line.rstrip("\n"), " ")
    x, y, z = (atof(part) for part in split(tokens[1], ","))
    print(tokens[0], x, y, z)
```

Note that `atof` does not accept a sign, so `"-1.5"` reads as `0.0`.

## What it does not do

The package defines the types of a scene but does not read a scene file into
a `Scene`, compute ray intersections, or render an image. There is no
command-line program and no window; everything here is a library to be
called from your own code.