# questkit

Building blocks for a small text role-playing game. The package has the combatants and their stats, game objects that hold components, two containers, a skyline rectangle packer and the engine behind an editable text field.

## Modules

- `questkit.entities`: `Entity` has a name, hit points (`hp`, `max_hp`) and an attack value (`atk`). `attack(target)` takes the attacker's `atk` off the target's `hp`. `is_dead()` is true at zero hit points or below. `resurrect()` restores full hit points, but only for a dead entity. `Player.advance_job(job)` applies a `Job` (Warrior, Wizard or Thief; each starts with 100 HP and 10 ATK). `Monster.set_difficulty(difficulty)` applies a `Difficulty`: Easy is 30/3, Medium 60/6 and Hard 90/9. Both methods return `False` and change nothing when the value is unknown.
- `questkit.ecs`: a `GameObject` holds `Component`s. `add_component(cls)` creates a component, attaches it and returns it. `get_component(cls)` and `remove_component(cls)` match the exact type, not subclasses. `components()` returns a copy of the list.
- `questkit.objects`: `BaseObject` has a name and an active flag, and is false when it was made without a name. This module has its own `GameObject` and `Component`. Its `GameObject` carries a `Tag`, its `remove_component` reports whether anything was removed, and its `clone()` copies the object together with cloned components that are attached to the copy.
- `questkit.linked_list`: `LinkedList`, a doubly linked list with `push_front`, `push_back`, `pop_front`, `pop_back`, `insert`, `erase`, indexing (negative indices allowed) and reverse iteration.
- `questkit.vector`: `Vector`, a growable array. It tracks `capacity()`, which grows by half (or by one when small) when the vector is full. It also has `push_back`, `pop_back`, `insert`, `erase`, `clear`, `swap`, `front` and `back`.
- `questkit.rectpack`: `RectPacker` places `Rect`s into a fixed area with a skyline packer. Choose the placement rule with `set_heuristic(Heuristic...)` and quantised or exact widths with `set_allow_out_of_mem`. `pack()` fills in `x`, `y` and `was_packed`, and returns whether every rectangle fitted.
- `questkit.textedit`: `TextEditState` is the engine of a text field. It handles cursor and selection movement, `Key` input, click and drag, `cut`, `paste`, typed `text`, insert mode, and `undo`/`redo`.
- `questkit.textedit_layout`: the `TextBuffer` interface, `PlainTextBuffer` (fixed-width text broken only at newlines), and the layout queries `locate_coord` and `find_charpos`.
- `questkit.textedit_undo`: `UndoState`, the bounded undo/redo store.

```python
from questkit.entities import Difficulty, Job, Monster, Player

hero = Player()
hero.advance_job(Job.WARRIOR)
foe = Monster()
foe.set_difficulty(Difficulty.EASY)
hero.attack(foe)      # foe.hp is now 20
```

```python
from questkit.rectpack import Rect, RectPacker

packer = RectPacker(64, 64, 64)
rects = [Rect(id=0, w=32, h=16), Rect(id=1, w=16, h=16)]
all_packed = packer.pack(rects)
```

```python
from questkit.textedit import Key, TextEditState
from questkit.textedit_layout import PlainTextBuffer

buffer = PlainTextBuffer("hello")
state = TextEditState()
state.key(buffer, Key.TEXTEND)
state.text(buffer, " world")
state.undo(buffer)    # str(buffer) == "hello"
```

## What it does not do

There is no playable game here. The package provides no command to run, no menu screens and no battle loop, and it has no items or inventory. Entities, game objects and the other pieces have to be driven from your own code.

## Tests

```
pip install -e .[test]
pytest
```