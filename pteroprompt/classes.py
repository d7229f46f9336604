# pteroprompt/classes.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

DINO_CLASSES: tuple[str, ...] = (
    "Dryosaurus",
    "Hypsilophodon",
    "Pachycephalosaurus",
    "Stegosaurus",
    "Tenontosaurus",
    "Carnotaurus",
    "Ceratosaurus",
    "Deinosuchus",
    "Omniraptor",
    "Pteranodon",
    "Troodon",
    "Beipiaosaurus",
    "Gallimimus",
    "Dilophosaurus",
    "Herrerasaurus",
    "Maiasaura",
    "Diabloceratops",
    "Triceratops",
    "Allosaurus",
    "Tyrannosaurus",
)

AI_CLASSES: tuple[str, ...] = (
    "Compsognathus",
    "Pterodactylus",
    "Boar",
    "Deer",
    "Goat",
    "Seaturtle",
)


def display_name(blueprint: str) -> str:
    """``BP_Tenontosaurus_C`` -> ``Tenontosaurus``; plain names pass through."""
    name = blueprint
    if name.startswith("BP_"):
        name = name[3:]
    if name.endswith("_C"):
        name = name[:-2]
    return name


# --- selectors ---------------------------------------------------------------

@dataclass(frozen=True)
class Explicit:
    names: tuple[str, ...]


@dataclass(frozen=True)
class All:
    pass


@dataclass(frozen=True)
class Nothing:
    pass


Selector = Union[Explicit, All, Nothing]


class InvalidClass(ValueError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name


def parse_selector(args: list[str], allow_none: bool = False) -> Selector:
    """``all`` and (when allowed) ``none`` only count as the sole argument;
    anything else is taken as an explicit list of names."""
    if len(args) == 1 and args[0] == "all":
        return All()
    if allow_none and len(args) == 1 and args[0] == "none":
        return Nothing()
    return Explicit(tuple(args))


def expand(selector: Selector, vocabulary: tuple[str, ...]) -> tuple[str, ...]:
    """Resolve a selector against a vocabulary.

    Explicit names are checked in order and the first unknown one raises
    :class:`InvalidClass`, so either every name is valid or nothing is
    returned.
    """
    if isinstance(selector, All):
        return vocabulary
    if isinstance(selector, Nothing):
        return ()
    for name in selector.names:
        if name not in vocabulary:
            raise InvalidClass(name)
    return selector.names
