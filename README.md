# pixelplay

Two small pygame programs in one package:

* a falling-block puzzle game on a 12 × 22 board, and
* an animated visualizer that shows insertion sort, selection sort and
  quick sort rearranging a row of bars.

The game rules and the sorting algorithms live in modules that do not need
a window, so they can be used and tested on their own.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing the block game

```
pixelplay-tetris [--width W] [--height H]
```

The window is 1920 × 1080 unless `--width` and `--height` say otherwise.

| Key         | Action                                  |
|-------------|-----------------------------------------|
| `A` / `D`   | move the falling piece left / right     |
| `Q` / `E`   | rotate the piece left / right           |
| `S` (hold)  | drop faster                             |
| `Backspace` | clear the board and start over          |
| `Escape`    | quit                                    |

The next piece is shown in a 4 × 4 preview to the right of the board.
Full rows are removed and everything above them falls down.

## Watching the sorting visualizer

```
pixelplay-sort [--width W]
```

The window is square, 1000 pixels a side unless `--width` says otherwise,
and one bar is sorted for every 10 pixels of width.

A menu lists Insertion Sort, Selection Sort and Quick Sort; click one to
choose it. A shuffled row of bars is drawn. Then:

| Key      | Action                                                |
|----------|-------------------------------------------------------|
| `R`      | run the chosen algorithm, animating every comparison  |
| `M`      | go back to the menu once the bars are sorted          |
| `F`      | toggle full screen                                    |
| `Escape` | quit (also stops a sort that is running)              |

## Using the modules

* `pixelplay.tetromino` – `BlockType`, the `Block` piece with its moves and
  rotations, `make_block(block_type)` and `random_block(rng)`.
* `pixelplay.board` – `GameBoard`, which places pieces, checks whether a
  move or rotation fits and clears full rows (`clear_full_rows()` returns
  how many went); `block_color` and `preview_cells` give the colour and
  preview shape of each piece type.
* `pixelplay.tetris` – `TetrisGame`, the game state driven one `step()` at a
  time (it also counts `lines_cleared`), plus `draw_board` and
  `draw_next_block`, the drawing helpers used by `pixelplay-tetris`.
* `pixelplay.stepsort` – bubble sort and insertion sort that advance one
  comparison per `step()` call, each call returning the indices that
  changed; build one with `build_step_algorithm(kind, size, rng)` and keep
  calling `step()` while `still_sorting()` is true. `spectrum(count)` gives
  a red-to-blue run of colours for the bars.
* `pixelplay.sorting` – `InsertionSort`, `BinaryInsertionSort`,
  `SelectionSort` and `QuickSort`, created with
  `create_algorithm(kind, screen_width, size, rng)`. Their `sort(canvas)`
  method reports every bar it touches to the canvas it is given.
  `HeadlessCanvas` records bar colours and counts frames in memory;
  `pixelplay.visualizer.PygameCanvas` draws on a pygame surface. Any object
  with the same `draw_bar`, `clear_bar`, `present` and `keep_running`
  methods will do.
* `pixelplay.visualizer` – the menu (`TextBox`, `menu_boxes`,
  `layout_text_boxes`, `algorithm_for_label`, `array_size_for`) and the
  `pixelplay-sort` window.

Every function that shuffles takes a `random.Random` instance, so runs can
be repeated exactly by seeding it.

## What it does not do

* The block game has no game-over: when pieces reach the top the game
  carries on. It keeps no score on screen, though `TetrisGame.lines_cleared`
  counts the rows removed.
* Binary insertion sort is not offered in the visualizer's menu; it can be
  run only from code through `create_algorithm`.
* The step-wise sorts in `pixelplay.stepsort` have no window or command of
  their own; drawing them is left to the caller.