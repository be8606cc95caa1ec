# autohmjeum

Compose Hangeul syllables from individual jamo as they are typed.

Jamo are fed one at a time, and they are grouped into syllables the way a Korean input method groups them:

- double vowels are merged, for example ㅗ + ㅏ → ㅘ;
- compound finals are merged, for example ㄹ + ㄱ → ㄺ;
- a final consonant moves on to the next syllable when a vowel follows it.

The package also contains:

- a loader for a `config.toml` file;
- time-driven background color effects.

It needs nothing beyond the Python standard library. It requires Python 3.11 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Composing text

```python
from autohmjeum.composer import InputComposer

composer = InputComposer()
for ch in "ㅎㅏㄴ":
    composer.feed(ch)

print(composer.display())   # 한
```

An `InputComposer` keeps three pieces of state:

- `committed`: the finished text of the current line;
- `composing`: the list of jamo still being composed;
- `history`: the list of submitted lines.

Its methods:

- `feed(ch)` handles one typed character.
  - ASCII punctuation and the space close the syllable being composed, then are appended.
  - Any other character that is not a jamo commits the composing jamo as they are, followed by that character.
  - The composing buffer holds at most five jamo.
- `display()` returns the committed text followed by the composing jamo as they would be rendered.
- `backspace()` removes the last composing jamo. When nothing is being composed, it reopens committed syllables into jamo.
- `finalize()` moves the composing jamo into the committed text.
- `commit_punctuation(ch)` finalizes, then appends `ch`.
- `enter()` finalizes, appends the line to `history`, clears it and returns it.

### Lower-level helpers

These are in `autohmjeum.composer`:

- `cluster_jamo_with_spans(raw)` merges adjacent jamo into compound vowels and finals. It returns the clusters and how many raw jamo each one consumed.
- `collapse_to_syllable(clusters)` turns one to three clusters into a single character, or returns `None`.
- `try_combine_vowel(a, b)` and `try_combine_final(a, b)` return the compound jamo, or `None`.
- `split_final_jamo(j)` splits a compound final into the part that stays and the part that moves on. A simple final moves whole.
- `is_punctuation(c)` tells whether `c` is ASCII punctuation or a space.

### Unicode building blocks

These are in `autohmjeum.jamo`:

- `compose_char(choseong, jungseong, jongseong)` builds one syllable. `jongseong` may be `None`.
- `decompose_char(syllable)` returns `(initial, medial, final_or_None)` as compatibility jamo.
- `ends_with_jongseong(text)` tells whether the last syllable of `text` has a final consonant.
- `is_jamo`, `is_compat_jamo`, `is_jaeum`, `is_moeum` and `is_choseong` classify code points.

Invalid input raises `HangeulError`, which is a subclass of `ValueError`.

## Configuration

`Config.load()` reads `config.toml`:

1. It first tries the directory of the running program.
2. If that file is missing or invalid, it reads `config.toml` from the current working directory.

You can also build a configuration directly with `Config.from_toml(text)` or `Config.from_dict(data)`.

A configuration raises `ConfigError` if any of these hold:

- it is malformed;
- a table or field is missing;
- a value has the wrong type or is out of range.

Integers must lie between 0 and 2³²−1. `osc.rx_port` must lie between 0 and 65535.

Every table and field below is required:

```toml
[frame_recorder]
frame_limit = 1000
fps = 30

[osc]
rx_port = 9000

[paths]
output_directory = "frames"

[speed]
bpm = 120

[rendering_main]
texture_width = 1920
texture_height = 1080
texture_samples = 4
arc_resolution = 64

[main_window]
width = 1920
height = 1080

[input_window]
width = 600
height = 400
```

`resolve_output_dir()` returns `paths.output_directory` as a `Path`. A relative path is taken from the running program's directory. `resolve_output_dir_as_str()` returns the same path as a string.

## Background effects

`autohmjeum.effects` works on `Rgb(red, green, blue)` colors, with each component between 0 and 1.

- `BackgroundFlash`
  - shows the flash color and fades it linearly towards black over the duration;
  - when the duration has passed, it returns the target color and stops.
- `BackgroundColorFade`
  - interpolates from the start color to the target color in HSL space;
  - takes the shorter way around the hue circle.

Both effects have:

- a `start(start_color, target_color, duration, current_time)` method;
- an `update(current_time)` method, which returns the color, or `None` when the effect is not running.

`lerp(a, b, t)` is the linear interpolation they use.

`autohmjeum.background.BackgroundManager` keeps a `current_color` and drives both effects. It has three methods:

- `flash(color, duration, time)`: if a flash is already running, the new flash keeps that flash's original target.
- `color_fade(target, duration, time)`: fades from the current color.
- `update(time)`: advances both effects and returns the current color.

`autohmjeum.app.FpsCounter` averages frame times and refreshes its reading every 0.3 seconds. Call `tick(dt, now)` for each frame and `reset(now)` to start a new measurement.

## Command line

```
autohmjeum [--config PATH]
```

The command first loads the configuration:

- from `PATH` when `--config` is given;
- otherwise as `Config.load()` does.

If the configuration cannot be loaded, it prints an error to standard error and exits with status 1.

It then reads standard input character by character and feeds each character to an `InputComposer`:

- A newline submits the current line. The line is printed as `Input submitted: <line>`.
- A backspace (`\b`) or delete (`\x7f`) character calls `backspace()`.
- At end of input, any unfinished line is submitted.

```
printf 'ㅎㅏㄴㄱㅡㄹ\n' | autohmjeum --config config.toml
Input submitted: 한글
```

## What this package does not do

It has no graphical windows. It does not draw the composed text or the background colors on screen; the effects only compute colors.

The configuration tables are read and validated, but nothing in the package uses them:

- the window and rendering sizes;
- the frame recorder settings;
- the OSC receive port;
- the tempo.

No frames are recorded and no network messages are received.