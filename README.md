# zombiefield

A small top-down scene built on pygame. A fixed background sits behind a
layered tile map that you can scroll with the arrow keys. Press space to
spawn a zombie under the mouse pointer; click on a zombie to hit it. Each hit
costs it 10 of its 100 hit points and shows its hurt frame for half a second;
when its hit points run out it shows its death frame and is removed from the
scene once more than five seconds have passed.

## Installing

```
pip install .
```

## Running

```
zombiefield
```

The command takes no options. It opens a 1200×900 window titled "Jogo IDJ"
and reads its assets from a `resources/` directory relative to the current
working directory:

- `resources/img/Background.png` – the background image
- `resources/img/Tileset.png` – a sheet of 64×64 tiles
- `resources/img/Enemy.png` – the zombie sprite sheet, 3 frames wide and 2 high
- `resources/map/mapf.txt` – the tile map
- `resources/audio/Hit0.wav`, `resources/audio/Dead.wav` – hit and death sounds

An asset that cannot be loaded is reported as a logged warning and the scene
goes on without it. If audio cannot be initialised, the game runs silently.

### Controls

| Key / button      | Action                                   |
|-------------------|------------------------------------------|
| Arrow keys        | Move the camera (200 pixels per second)  |
| Space             | Spawn a zombie at the mouse position     |
| Left mouse button | Hit the zombie under the pointer         |
| Escape            | Quit (closing the window quits too)      |

## Tile map format

The map file is a list of integers separated by whitespace or commas. The
first three are the width, height and depth (number of layers); after them
come the tile indices, layer by layer, each layer row by row. A negative index
leaves that cell empty, and an index past the end of the tile set is not drawn.

```
3 2 1
0 1 2
-1 4 5
```

`TileMap.load` raises `ValueError` when the file is not all integers, lacks
its dimensions, has negative dimensions or holds too few tiles. Tiles are
read and written as `tile_map[x, y, z]`; positions outside the map raise
`IndexError`.

## Using the pieces

The building blocks can be used on their own:

```python
from zombiefield.vec2 import Vec2
from zombiefield.rect import Rect
from zombiefield.timer import Timer

box = Rect(0, 0, 10, 10)
box.contains(Vec2(5, 5))        # True
(box + Vec2(3, 4)).center()     # Vec2(x=8.0, y=9.0)

timer = Timer()
timer.update(0.25)
timer.get()                     # 0.25
```

- `zombiefield.game_object` – `GameObject` holds a bounding `box` and a list
  of `Component`s that are started, updated and rendered in the order they
  were added; `get_component` finds the first one answering to a type name.
- `zombiefield.input_manager` – `InputManager` turns pygame events into
  held, pressed-this-frame and released-this-frame state for keys and mouse
  buttons; `update` accepts a list of events or polls pygame itself.
- `zombiefield.camera` – `Camera` follows a game object or scrolls with the
  arrow keys.
- `zombiefield.resources` – cached `get_image`, `get_music` and `get_sound`,
  raising `ResourceError` for files that cannot be loaded, and the matching
  `clear_*` functions.
- `zombiefield.sprite`, `zombiefield.sprite_renderer`, `zombiefield.animator`,
  `zombiefield.tile_set`, `zombiefield.tile_map` – sprite sheets, frame
  animations and layered tile maps.
- `zombiefield.music` and `zombiefield.sound` – `Music` and `Sound` wrappers
  over pygame's mixer.
- `zombiefield.state` and `zombiefield.game` – the scene and the main loop.

## What it does not do

The scene has no music playing, no scoring, no way for zombies to move or
attack, and no saving; `Music` is available but the game never starts a
track.

## Tests

```
pip install .[test]
pytest
```