# remedy

A small top-down role-playing game built on pygame. The player walks
around a field map, is stopped by the map's collision lines, and moves
on to other maps through transition triggers.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Playing

```
remedy [--dev] [--root DIR]
```

- `--root DIR`: the directory that holds the game's `graphics/` and
  `data/` folders (default: the working directory).
- `--dev`: development mode, with debug information and the command line.

The game reads these files under the root directory:

- `graphics/maps/<map>.png`: the base image of each map
- `data/maps/<map>.tmj`: the map data, a JSON file in the Tiled map format
- `graphics/palette.png`: the colour palette; up to 56 distinct visible
  colours are read from it

A missing map image or map data file raises `MapNotFoundError`
(`remedy.field_map`). The first map loaded is `db_01`.

The game draws onto a 426x240 canvas that is scaled up to a 1280x720
window, and runs at 60 frames per second.

### Controls

- Arrow keys move the player; moving diagonally is slower than moving
  straight.
- `Escape`, or closing the window, quits.

In development mode there are also these:

- `F3` shows or hides debug information: the frame rate and the map's
  collision lines.
- `/` opens or closes the command line, `Enter` runs the command and
  `Backspace` deletes the last character. The player cannot move while
  the command line is open.

### Commands

```
MAP <map_name> [spawn_name]
```

Loads another map. The command name is not case sensitive. The player is
placed at the spawn point whose class is `spawn_name`; if the map has no
such spawn point, or none is given, the player is placed at the map's
initial spawn point.

## Map format

Map data is Tiled JSON with object layers named:

- `Collisions`: polylines that the player cannot cross
- `Spawnpoints`: points. One without a class is the initial spawn point;
  the others are matched by their class.
- `MapTransitions`: rectangles with the properties `map_dest`,
  `spawn_dest` and `direction` (`-2` up, `-1` left, `1` right, `2` down).
  The player sets one off by walking into it while moving in that
  direction. The screen fades out, the new map is loaded, and the screen
  fades back in.

## Logging

Log lines go to the console and to `log.csv` in the working directory.
The file rolls over at about one megabyte, and five old files are kept.
Development mode logs at debug level.

## What it does not do

- The player is drawn as a plain rectangle; there are no sprites or
  animations.
- Only the player actor is created from a map. Spawn points for other
  kinds of actors, such as companions or enemies, are not used, and
  there are no battles.
- Game progress is not saved.
- Collision and bounding boxes of entities are always drawn as outlines.