# Area: Gateway
"""
career_link._gateway.demo_client — Offline demo LLM client
==========================================================

A ready-to-use BaseLLMClient that works without an API key. Challenges come
from a built-in table of club pairs per difficulty band; answers are checked
against the known players who link each pair. Replies use the same wire
shape as the live service, so they go through the same parsing path.

Usage:
    from career_link import DemoLLMClient, Gateway

    gateway = Gateway(DemoLLMClient())
"""

from __future__ import annotations

import logging
import random
import unicodedata
from typing import Any, Dict, List, Optional, Tuple

from .llm_client import BaseLLMClient
from .prompts import band_for_level

logger = logging.getLogger("career_link.gateway.demo_client")

# (subject_a, subject_b, players who played for both) per band's first level
DEMO_CHALLENGES: Dict[int, List[Tuple[str, str, List[str]]]] = {
    1: [
        ("Real Madrid", "Manchester United",
         ["Cristiano Ronaldo", "David Beckham", "Ruud van Nistelrooy",
          "Raphaël Varane", "Casemiro", "Ángel Di María"]),
        ("Juventus", "Real Madrid",
         ["Zinedine Zidane", "Cristiano Ronaldo", "Gonzalo Higuaín",
          "Sami Khedira", "Fabio Cannavaro"]),
        ("Barcelona", "Liverpool",
         ["Luis Suárez", "Javier Mascherano", "Philippe Coutinho"]),
        ("Barcelona", "Bayern Munich",
         ["Robert Lewandowski", "Arturo Vidal", "Thiago Alcântara",
          "Philippe Coutinho"]),
    ],
    3: [
        ("Arsenal", "Borussia Dortmund",
         ["Pierre-Emerick Aubameyang", "Henrikh Mkhitaryan", "Tomáš Rosický"]),
        ("Roma", "Liverpool", ["Mohamed Salah", "Alisson Becker"]),
        ("Atlético Madrid", "Chelsea",
         ["Fernando Torres", "Diego Costa", "Thibaut Courtois",
          "Filipe Luís", "Álvaro Morata"]),
    ],
    5: [
        ("Benfica", "Manchester City",
         ["Rúben Dias", "Nicolás Otamendi", "Ederson", "João Cancelo"]),
        ("Ajax", "Tottenham Hotspur",
         ["Christian Eriksen", "Jan Vertonghen", "Toby Alderweireld",
          "Davinson Sánchez"]),
        ("Everton", "Manchester United",
         ["Wayne Rooney", "Marouane Fellaini", "Romelu Lukaku",
          "Morgan Schneiderlin"]),
    ],
    7: [
        ("Celtic", "Southampton",
         ["Virgil van Dijk", "Victor Wanyama", "Fraser Forster"]),
        ("Feyenoord", "Manchester United", ["Robin van Persie"]),
        ("Burnley", "Everton", ["Michael Keane"]),
    ],
    9: [
        ("Hull City", "Tottenham Hotspur", ["Tom Huddlestone", "Jake Livermore"]),
        ("Stoke City", "Barcelona", ["Bojan Krkić"]),
        ("Crewe Alexandra", "Manchester United", ["Nick Powell"]),
    ],
}


def normalize_name(name: str) -> str:
    """Casefold, strip accents and collapse whitespace."""
    decomposed = unicodedata.normalize("NFKD", name)
    plain = "".join(c for c in decomposed if not unicodedata.combining(c))
    return " ".join(plain.replace("-", " ").casefold().split())


class DemoLLMClient(BaseLLMClient):
    """
    Demo implementation of BaseLLMClient using the built-in table.

    An answer counts when it matches a known linking player's full name or
    surname, ignoring case and accents.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def is_available(self) -> bool:
        return True

    def generate_json(
        self,
        operation: str,
        system: str,
        prompt: str,
        schema: Dict[str, Any],
        request_payload: Dict[str, Any],
        temperature: Optional[float] = None,
    ) -> Any:
        if operation == "request_challenge":
            return self._challenge(request_payload)
        if operation == "validate_answer":
            return self._validate(request_payload)
        raise ValueError(f"Unknown operation: {operation}")

    def _challenge(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        band = band_for_level(payload["level"])
        pool = DEMO_CHALLENGES[band.first_level]
        avoid = {normalize_name(s) for s in payload.get("avoid", [])}

        fresh = [
            c for c in pool
            if normalize_name(c[0]) not in avoid and normalize_name(c[1]) not in avoid
        ]
        subject_a, subject_b, _ = self._rng.choice(fresh or pool)
        logger.debug("Demo challenge for level %d: %s / %s",
                     payload["level"], subject_a, subject_b)
        return {"subjectA": subject_a, "subjectB": subject_b}

    def _validate(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        a, b = payload["subjectA"], payload["subjectB"]
        answer = normalize_name(payload["answer"])
        links = self._links_for(a, b)

        for player in links:
            full = normalize_name(player)
            if answer == full or answer == full.split()[-1]:
                return {
                    "isCorrect": True,
                    "message": f"Correct! {player} played for both {a} and {b}.",
                }

        if not links:
            return {
                "isCorrect": False,
                "message": f"No known link between {a} and {b} in the demo data.",
            }
        return {
            "isCorrect": False,
            "message": f"{payload['answer']} is not a known link between {a} and {b}.",
            "alternativeAnswer": links[0],
        }

    @staticmethod
    def _links_for(subject_a: str, subject_b: str) -> List[str]:
        wanted = {normalize_name(subject_a), normalize_name(subject_b)}
        for pool in DEMO_CHALLENGES.values():
            for a, b, players in pool:
                if {normalize_name(a), normalize_name(b)} == wanted:
                    return players
        return []
