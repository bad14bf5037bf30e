# texstream

texstream fills a window with a texture that is drawn a few pixels at a time.
The drawing starts from a random seed pixel and spreads out over the field.
Each pixel that gets visited is coloured by a slowly drifting colour
generator. Each neighbour that is waiting to be visited shows up white. The
field wraps around its edges like a torus.

When more than 90 % of the field's cells have been marked as visited, the
drawer forgets which cells it has visited, so old pixels can be painted again.
When no pixels are waiting, it starts again from a fresh random seed.

## Installing

```
pip install .
```

The window is drawn with pygame. To run the tests, install the `test` extra:

```
pip install .[test]
pytest
```

## Running

```
texstream
```

This opens a 1024×768 window. Add `-f` to run full screen at the display's
own resolution:

```
texstream -f
```

The field is scaled to fill the window. Row zero of the field is drawn at the
bottom. While the demo runs, the current frame rate is printed on one line of
the terminal.

### Controls

| Key              | Effect                                                                |
|------------------|-----------------------------------------------------------------------|
| `Esc`            | Quit (closing the window also quits)                                  |
| `1` … `6`        | Picker: random, from start, from end, then the same three but picking only on about half of the steps |
| keypad `1` … `6` | Pusher, in the same order; the last three drop about half of the new neighbours |
| `Q`              | Visit all four neighbours of a pixel                                  |
| `W`              | Keep each neighbour with a 59 % chance                                |
| Mouse wheel      | Double or halve the number of pixels drawn per frame, down to a minimum of 1/60; the new value is printed |

The picker decides which waiting pixel is visited next. The pusher decides
where newly found neighbours join the waiting list. Between them they shape
the pattern. Taking from the start and pushing to the end gives a
breadth-first flood. Taking from the end gives a depth-first trail. Random
choices lean toward the front of the list and give a noisy growth.

## Using the pieces

The drawing parts can be used without a window:

```python
import random

from texstream.field import Field
from texstream.topology import TorusTopology
from texstream.color_generators import BouncingColorGenerator
from texstream.factories import (
    PickerType,
    PointsTraverserType,
    create_picker,
    create_pusher,
    create_points_traverser,
)
from texstream.drawers import PointsTraverserDrawer

rng = random.Random(0)
field = Field(64, 48, 0x00000000)
drawer = PointsTraverserDrawer(
    TorusTopology(64, 48),
    create_picker(PickerType.FROM_START, rng),
    create_pusher(PickerType.FROM_END, rng),
    create_points_traverser(PointsTraverserType.NEIGHBOUR4, rng),
    BouncingColorGenerator(0.001, 0.003, 0.011),
    0.9,
    rng,
)
for _ in range(1000):
    drawer.draw(field)

rgba = field.to_bytes()  # RGBA bytes, one row after another
```

The modules:

- `texstream.point`: `Point`, an immutable grid position that can be added.
- `texstream.field`: `Field`, a grid of cells. It is indexed by `Point` or
  through `get_cell` and `set_cell`. Out-of-range access raises
  `texstream.errors.OutOfRangeError`.
- `texstream.topology`: `TorusTopology` wraps around the edges.
  `CroppedTopology` returns `None` for steps that leave the grid.
- `texstream.colors`: `Color` names some colours. Colours are 32-bit
  `0xRRGGBBAA` integers. `color_encode`, `color_encode_float`, `color_decode`,
  `color_decode_float`, `color_sum` and `bounce01` work on them.
- `texstream.color_generators`: `BouncingColorGenerator`,
  `RandomColorGenerator`, `SingleColorGenerator`, and a
  `FilteredColorGenerator` that can be combined with `LowPassColorFilter`.
- `texstream.pickers`, `texstream.pushers`, `texstream.traversers`: the
  strategies used by `PointsTraverserDrawer`. `texstream.factories` builds
  them by `PickerType` or `PointsTraverserType`.
- `texstream.drawers`: `PointsTraverserDrawer`, and `RandomDrawer`, which
  paints one random cell per step.
- `texstream.chance_drawers`: queue- and stack-based flood fills.
  - `QueuePopWithChanceDrawer` and `StackPopWithChanceDrawer` expand a
    popped point only with a given chance. The stack version paints a
    declined point black.
  - `QueuePushWithChanceDrawer` and `StackPushWithChanceDrawer` add each
    neighbour only with a given chance.
- `texstream.util`:
  - `get_file_contents` reads a whole text file.
  - `format_tex` renders an RGBA byte image as text, with each channel halved.
  - `print_tex` prints that text.
- `texstream.app`: `StreamerApp` and the `main` entry point of the
  `texstream` command.