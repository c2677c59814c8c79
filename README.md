# fastlanefury

A small highway traffic simulation drawn with pygame. Vehicles enter a
four-lane road at the right edge and drive to the left. Each vehicle runs as
its own periodic task on a thread. On every period it casts rays over the
rendered scene to sense other vehicles in front, behind and to each side.
Depending on what it sees, it accelerates, slows down, moves over into the
next lane to overtake, or aborts the overtake.

A graphics task redraws the screen at about 60 frames per second. A user task
reads the keyboard and mouse. Every task has a period and a deadline, and the
info panel shows the total number of missed deadlines.

## Installation

```
pip install .
```

## Running

```
fastlanefury [--assets DIR] [--seed N]
```

- `--assets DIR`: directory holding the game's images and driving data.
  Default: `../Assets`.
- `--seed N`: seed for the random generator. Use it to get repeatable spawns.

The package ships no images or data, so the assets directory has to provide
them.

The sprites go under `DIR/Bitmap/VeicleBitmap/`:

- `Car/C_bitmap0.bmp` … `C_bitmap88.bmp`
- `Truck/T_bitmap0.bmp` … `T_bitmap39.bmp`
- `Motorcycle/M_bitmap0.bmp` … `M_bitmap7.bmp`
- `SuperCar/SC_bitmap0.bmp` … `SC_bitmap15.bmp`

Each sprite is scaled to 60 % when it is loaded. Pixels of colour (255, 0, 255)
are drawn as transparent.

The driving limits go under `DIR/Data/`, in `Car.txt`, `Truck.txt`,
`Motorcycle.txt` and `Supercar.txt`. The first line of each file is a header.
Every later line holds

```
max_speed-max_acceleration-max_deceleration-min_distance
```

in m/s, m/s², m/s² and metres. Negative values keep their sign, for example
`40-3-5-3` or `40-3--5-3`. A new vehicle draws one of these rows at random.

If the window, the sprites or the data files cannot be loaded, the command
prints an error and exits with status 1.

## Controls

| Input        | Action                                                           |
|--------------|------------------------------------------------------------------|
| `SPACE`      | Spawn a random car, truck or motorcycle                          |
| `1` – `4`    | Spawn a car, truck, motorcycle or supercar                       |
| `P`          | Pause or resume the simulation                                   |
| `A`          | Switch between automatic and manual spawning                     |
| Left click   | Select the vehicle under the cursor, or a point on the road      |
| `Z`          | Zoom on the selected vehicle or road point; press again to cycle the zoom level |
| `X`          | Leave the zoomed view                                            |
| `UP`/`DOWN`  | Raise or lower the simulation speed by 0.1                       |
| `ESC`        | Quit; closing the window also quits                              |

Vehicles cannot be spawned while the game is paused.

Automatic spawning is on at start. While it is on and the game is running, a
random car, truck or motorcycle appears every two seconds.

When a vehicle is selected, the info panel shows:

- its task period, deadline and priority
- its sprite type, lane, speed in km/h and acceleration
- its position, steering angle and driving state

The reach of its front, back and side sensors is also drawn on the road. A
vehicle that leaves the road on the left is removed and deselected.

## Library use

The pieces can be used without the window:

- `fastlanefury.vehicle`: the driving state machine (`drive`), spawning
  (`init_vehicle`) and sensor sweeps (`measure`).
- `fastlanefury.sensor.proximity_sensor`: the single ray cast.
- `fastlanefury.ptask.TaskScheduler`: periodic tasks with deadline
  accounting.
- `fastlanefury.stat_file.StatisticsStore`: the data-file reader.
- `fastlanefury.shared_list.SharedList` and
  `fastlanefury.support_list.SupportList`: the thread-safe vehicle registry
  and the store of pause snapshots.

## Limitations

- Tasks are ordinary Python threads. The priority given to each task is
  recorded and shown, but it does not affect scheduling. Cancelling a task
  only asks it to stop at its next period.
- Nothing is saved between runs.
- There are no on-screen buttons; all settings are changed from the keyboard.

## Development

```
pip install -e ".[test]"
pytest
```