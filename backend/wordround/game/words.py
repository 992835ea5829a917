from __future__ import annotations

import random
from typing import Sequence


DEFAULT_WORDS_DE: tuple[str, ...] = (
    # Essen & Trinken
    "Eissorte", "Brotaufstrich", "Obst", "Gemüse", "Käse", "Getränk",
    "Cocktail", "Pizza-Belag", "Süßigkeit", "Snack", "Fast-Food-Gericht",
    "Teesorte", "Nudelgericht", "Suppenart", "Gewürz",
    # Backen & Kochen
    "Gebäck", "Kuchen", "Plätzchen", "Brotart", "Frühstücksgericht",
    "Soße", "Salatsorte",
    # Wohnen & Haus
    "Teil eines Hauses", "Raum in einer Wohnung", "Möbelstück", "Haushaltsgerät",
    "Deko-Objekt", "Bodenbelag", "Wandfarbe", "Haustier",
    # Fahrzeuge & Technik
    "Automarke", "Automodell", "Motorradmarke", "Fahrradtyp", "Flugzeugtyp",
    "Computerspiel", "Smartphone-Marke", "Konsolenspiel", "App",
    # Medien & Unterhaltung
    "Youtuber/Streamer", "Filmgenre", "Seriencharakter", "Musikinstrument",
    "Musikgenre", "Sänger/in", "Bandname", "Buchreihe", "Comicfigur",
    "Superheld", "Cartoonfigur", "Serie", "Disney-Figur",
    # Schule & Bildung
    "Schulfach", "Beruf", "Mathematikbegriff", "Musikrichtung", "Geschichtsereignis",
    # Freizeit & Reisen
    "Sportart", "Brettspiel", "Reiseziel", "Stadt", "Land",
    "Insel", "Tier", "Hobby", "Festival", "Jahreszeit", "Feiertag",
    # Sonstiges
    "Kleidungsstück", "Schmuckstück", "Farbe", "Blume", "Baum", "Wetterphänomen",
)


def pick_word(words: Sequence[str], rng: random.Random | None = None) -> str:
    """Uniform, independent draw; the previous prompt may come up again."""
    if not words:
        raise ValueError("word list is empty")
    return (rng or random).choice(words)
