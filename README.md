# clickbutton

*Click this button!* is a short arcade game. You are the red dot, and the dot follows
the mouse. A green button appears, and your job is to keep it alive. As the game goes
on, it adds more rules:

- **Button time**: a time bar under the button empties over 8 seconds. Each click on
  the button fills it again. If the bar runs out, you lose.
- **Timer**: a clock in the corner counts how long you have survived, shown as `MM:SS`.
- **Durability**: every click on the button wears it down by one point out of six.
  When durability reaches zero, you lose.
- **Fix**: a yellow **FIX** button appears. Clicking it restores durability to full.
- **Triangles**: blue triangles fly in from the right toward the button. Click one to
  break it. If a triangle reaches the button, you lose.
- **Square**: a large purple square slides onto the button and covers it. Drag the
  square to throw it off screen. After it leaves, a new square comes.
- **Pentagon**: an orange pentagon chases the red dot. If it catches you, you lose.

Survive the whole sequence to win.

## Installing

```
pip install .
```

You need Python 3.10 or later. The install also brings in `pygame`.

## Playing

```
clickbutton [--assets DIR] [--width W] [--height H]
```

- `--assets`: the directory that holds `sequence.seq`. The default is `assets`.
- `--width`, `--height`: the window size. The default is 1280 × 720.

The game opens on a loading screen. It reads the sequence file and then starts
play. If the file is missing or malformed, the game stops with an error. After a
loss or a win, a game-over screen shows the reason and offers **Retry** and **Exit**.

Controls:

- Move the mouse to move the red dot.
- Left-click to press the button, the FIX button and triangles.
- Hold the left button and move the mouse over the square to throw it away.
- `P` or `Escape` pauses the game and opens the pause menu. The pause menu has
  **Continue**, **Settings**, **Restart** and **Exit**. `Escape` closes the menu again.
- The **Settings** menu sets the master volume from 0% to 300% in steps of 10%.

## The action sequence

A plain text file drives the game. Each line that is not blank and does not start
with `#` has three fields separated by `|`:

```
# seconds | kind | content
2.0 | T | You're the red dot. Move with your mouse.
3.0 | M | Button
1.5 | T | Click it!
```

- The first field is the delay in seconds after the previous action.
- `T` replaces the guide text. An empty content field clears it.
- `M` starts a mechanic. The name is matched without regard to case. The names are
  `None`, `Button`, `Button Time`, `Timer`, `Durability`, `Fix`, `Triangles`,
  `Square`, `Pentagon` and `Victory`. `Victory` ends the round as a win.

`clickbutton.sequencer.parse_sequence` reads this format from a string, and
`clickbutton.sequencer.load_sequence` reads it from a file. A malformed line, or a
file that cannot be read, raises `clickbutton.sequencer.SequenceError`.

## Using the pieces

The game logic does not depend on the window. You can use and test each part on
its own:

```python
from clickbutton.sequencer import parse_sequence, Sequencer
from clickbutton.bar import Bar, BarBehavior

actions = parse_sequence("1.0 | T | Hello\n2.0 | M | Button\n")
sequencer = Sequencer(actions)
print(sequencer.update(1.0))   # Action(time=1.0, kind=ChangeText(text='Hello'))

bar = Bar(max=8.0, current=8.0, behavior=BarBehavior(trigger_on_empty=True))
bar.current -= 9.0
print(bar.settle(), bar.progress())   # [<BarEvent.EMPTY: 'empty'>] 0.0
```

Modules:

- `clickbutton.states`: screens, menus and deferred state changes (`Navigation`).
- `clickbutton.sequencer`: the action sequence and its player.
- `clickbutton.bar`: bars that clamp their value and report when they become empty or full.
- `clickbutton.effects`: timers, pulsing scale and ring particles.
- `clickbutton.button`: the button, its time bar, durability and the FIX button.
- `clickbutton.clock`: the survival clock.
- `clickbutton.player`: the red dot.
- `clickbutton.enemies`: the pentagon, the squares, the triangles and their fragments.
- `clickbutton.audio`: sound descriptions, master volume, a mixer and `ResourceLoader`.
- `clickbutton.theme`, `clickbutton.menus`, `clickbutton.screens`: widgets, menus and screens.
- `clickbutton.world`: `GameWorld`, which holds one round of play.
- `clickbutton.app`: `App`, the pygame window and loop, and the `main` entry point.

## What it does not do

- **No sound.** The game keeps track of music and sound effects and their volumes.
  The window that `clickbutton` opens has no audio backend, so nothing is heard.
  To get sound, give `AudioMixer` an object with `play`, `set_volume` and `stop` methods.
- **No assets.** The package does not include a sequence file, fonts, images or
  sounds. Shapes are drawn as plain circles and rectangles, and text uses the default
  pygame font.
- **No splash screen or title menu at start-up.** Those screens and the main and
  credits menus exist in `clickbutton.screens` and `clickbutton.menus`. The command
  goes straight from loading to play.