# ai_lab/features/sentiment/lexicon.py
"""
Word polarity lexicon.

The scorer treats the lexicon as an injected, read-only mapping of
lowercase word -> integer polarity in [-5, 5]. A compact AFINN-style table
ships as DEFAULT_LEXICON; `load_lexicon` reads a replacement table from a
YAML file of `word: polarity` pairs.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Union

import yaml

from ai_lab.utils.config import load_config
from ai_lab.utils.logger import get_logger

logger = get_logger(__name__)

MIN_POLARITY = -5
MAX_POLARITY = 5

_DEFAULT_WEIGHTS: Dict[str, int] = {
    # --- strongly positive ---
    "amazing": 4, "awesome": 4, "brilliant": 4, "fantastic": 4, "fabulous": 4,
    "incredible": 4, "outstanding": 5, "superb": 5, "breathtaking": 5,
    "thrilled": 5, "wonderful": 4, "masterpiece": 4, "rejoice": 4, "triumph": 4,
    "win": 4, "winner": 4, "winning": 4, "funny": 4, "heavenly": 4,
    # --- positive ---
    "love": 3, "loved": 3, "loves": 3, "lovely": 3, "loving": 2, "like": 2,
    "liked": 2, "likes": 2, "good": 3, "great": 3, "best": 3, "better": 2,
    "beautiful": 3, "excellent": 3, "excited": 3, "exciting": 3, "enjoy": 2,
    "enjoyed": 2, "happy": 3, "happiness": 3, "glad": 3, "delighted": 3,
    "delight": 3, "pleased": 3, "perfect": 3, "perfectly": 3, "impressive": 3,
    "impressed": 3, "admire": 3, "charming": 3, "cheerful": 2, "favorite": 2,
    "fun": 4, "nice": 3, "positive": 2, "recommend": 2, "recommended": 2,
    "satisfied": 2, "smile": 2, "smiling": 2, "strong": 2, "success": 2,
    "successful": 3, "super": 3, "thank": 2, "thanks": 2, "thankful": 2,
    "useful": 2, "valuable": 2, "welcome": 2, "worth": 2, "yes": 1, "cool": 1,
    "fine": 2, "fair": 2, "helpful": 2, "hope": 2, "hopeful": 2, "improve": 2,
    "improved": 2, "improvement": 2, "interesting": 2, "kind": 2, "calm": 2,
    "clean": 2, "comfortable": 2, "confident": 2, "easy": 1, "fast": 2,
    "friendly": 2, "gain": 2, "gains": 2, "growth": 2, "profit": 2,
    "profitable": 2, "rally": 2, "bullish": 2, "upgrade": 1, "upgraded": 1,
    "support": 2, "supported": 2, "wow": 4, "yay": 2, "proud": 2, "agree": 1,
    "accept": 1, "accepted": 1, "achieve": 2,
    "achievement": 2, "benefit": 2, "bright": 1, "care": 2, "certain": 1,
    "clear": 1, "creative": 2, "effective": 2, "efficient": 2, "free": 1,
    "fresh": 1, "generous": 2, "innovative": 2, "joy": 3, "lucky": 3,
    "optimistic": 2, "peace": 2, "reliable": 2, "rich": 2, "safe": 1,
    "solid": 2, "stable": 2, "sweet": 2, "top": 2, "trust": 1, "wealth": 3,
    # --- negative ---
    "bad": -3, "worse": -3, "worst": -3, "hate": -3, "hated": -3, "hates": -3,
    "hating": -3, "awful": -3, "terrible": -3, "horrible": -3, "poor": -2,
    "sad": -2, "angry": -3, "anger": -3, "annoy": -2, "annoyed": -2,
    "annoying": -2, "boring": -3, "bored": -2, "broken": -1, "complain": -2,
    "complaint": -2, "confused": -2, "crash": -2, "crashed": -2, "cry": -1,
    "damage": -3, "damaged": -3, "dead": -3, "death": -2, "disappoint": -2,
    "disappointed": -2, "disappointing": -2, "disappointment": -2,
    "dislike": -2, "fail": -2, "failed": -2, "failure": -2, "fear": -2,
    "fraud": -4, "hurt": -2, "ill": -2, "lose": -3, "loser": -3, "loss": -3,
    "losses": -3, "lost": -3, "mess": -2, "mistake": -2, "negative": -2,
    "pain": -2, "problem": -2, "problems": -2, "scam": -2,
    "slow": -2, "sorry": -1, "stupid": -2, "ugly": -3, "unhappy": -2,
    "upset": -2, "useless": -2, "waste": -1, "wasted": -2, "weak": -2,
    "wrong": -2, "no": -1, "drop": -1, "dropped": -1, "fall": -1,
    "falling": -1, "crisis": -3, "bearish": -2, "downgrade": -2,
    "downgraded": -2, "decline": -1, "declined": -1, "risk": -2, "risky": -2,
    "panic": -3, "worry": -3, "worried": -3, "afraid": -2, "alone": -2,
    "blame": -2, "cheat": -3, "cheated": -3, "delay": -1, "delayed": -1,
    "difficult": -1, "dirty": -2, "doubt": -1, "expensive": -2, "fake": -3,
    "guilty": -3, "lie": -2, "liar": -3, "lies": -2, "miss": -2, "missed": -2,
    "nervous": -2, "rude": -2, "scared": -2, "shame": -2, "sick": -2,
    "stress": -1, "stressed": -2, "struggle": -2, "suffer": -2, "tired": -2,
    "trouble": -2, "unfair": -2, "warning": -3, "weird": -2,
    # --- strongly negative ---
    "horrific": -4, "disgusting": -3, "furious": -3, "hell": -4,
    "catastrophe": -3, "catastrophic": -4, "devastated": -2, "disaster": -2,
    "nightmare": -3, "pathetic": -2, "racist": -3, "rape": -4, "torture": -4,
    "terrorist": -2, "bastard": -5, "bitch": -5, "fuck": -4, "fucking": -4,
    "shit": -4, "crap": -3, "damn": -4, "douche": -3, "prick": -5,
}

DEFAULT_LEXICON: Mapping[str, int] = MappingProxyType(_DEFAULT_WEIGHTS)


def validate_lexicon(raw: Mapping) -> Dict[str, int]:
    """
    Normalise a raw word -> polarity mapping.

    Keys are lowercased and stripped; values must be integers within
    [MIN_POLARITY, MAX_POLARITY].

    Args:
        raw (Mapping): Mapping loaded from a file or built in code.

    Returns:
        Dict[str, int]: Cleaned lexicon.

    Raises:
        ValueError: If a key is not a non-empty string or a weight is not an
            integer in range.
    """
    if not isinstance(raw, Mapping):
        raise ValueError(f"Lexicon must be a mapping of word -> polarity, got {type(raw).__name__}")

    lexicon: Dict[str, int] = {}
    for word, weight in raw.items():
        if not isinstance(word, str) or not word.strip():
            raise ValueError(f"Lexicon keys must be non-empty strings, got {word!r}")
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise ValueError(f"Polarity for '{word}' must be an integer, got {weight!r}")
        if not MIN_POLARITY <= weight <= MAX_POLARITY:
            raise ValueError(
                f"Polarity for '{word}' out of range [{MIN_POLARITY}, {MAX_POLARITY}]: {weight}"
            )
        lexicon[word.strip().lower()] = weight
    return lexicon


def load_lexicon(path: Union[str, Path]) -> Mapping[str, int]:
    """
    Load a word -> polarity table from a YAML file.

    Args:
        path (str | Path): YAML file of `word: polarity` pairs.

    Returns:
        Mapping[str, int]: Read-only lexicon.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If an entry fails validation.
    """
    try:
        raw = load_config(path)
    except yaml.YAMLError:
        logger.error(f"Lexicon file is not valid YAML: {path}")
        raise
    lexicon = validate_lexicon(raw)
    logger.info(f"Loaded lexicon with {len(lexicon)} entries from {path}")
    return MappingProxyType(lexicon)
