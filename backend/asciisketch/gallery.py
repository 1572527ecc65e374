"""Built-in example diagrams."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Example:
    id: str
    name: str
    data: str


EXAMPLES: tuple[Example, ...] = (
    Example(
        id="arch",
        name="Cloud Arch",
        data=r"""      [ Mobile ]
          |
    +-----+-----+
    |  Auth API |
    +-----+-----+
          |
    +-----+-----+      +--------+
    |  Gateway  | <--- | Config |
    +-----+-----+      +--------+
       /     \
   [Node 1] [Node 2]
      \       /
    +-----+-----+
    | Database  |
    +-----------+""",
    ),
    Example(
        id="flow",
        name="Login Flow",
        data="""( Start )
    |
[ Credentials ]
    |
{ Valid? } --No--> [ Error ]
    |
   Yes
    |
[ Home Page ]
    |
 ( End )""",
    ),
    Example(
        id="ui",
        name="Web Layout",
        data="""+-----------------------+
| [ Logo ]  [H] [A] [C] |
+-----------------------+
|                       |
|   [ Better Design ]   |
|   [ Modern Style  ]   |
|                       |
|   +-------+ +-------+ |
|   | Card1 | | Card2 | |
|   +-------+ +-------+ |
+-----------------------+""",
    ),
    Example(
        id="rocket",
        name="Rocket Art",
        data=r"""      /\
     |  |
     |  |
    /|  |\
   /_|  |_\
     |  |
    /____\
   ( vvvv )""",
    ),
    Example(
        id="system",
        name="Bot System",
        data=r"""      [o] [o]
       \___/
      |     |
    --| ROB |---
      |     |
      +-----+
       /   \
      [ ] [ ]""",
    ),
)

_BY_ID = {ex.id: ex for ex in EXAMPLES}


def get_example(example_id: str) -> Example:
    """Look up an example by id. Raises KeyError if unknown."""
    return _BY_ID[example_id]
