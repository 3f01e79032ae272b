# Configuration: alphabet, code length, attempts, display maps, etc.
DEFAULT_RULES = {
    "name": "hexle",  # Identifier for this ruleset
    "code_length": 6,  # Number of hex digits in the code (grid columns)
    "max_attempts": 6,  # Number of guesses per game (grid rows)
    "symbols": [
        "0",
        "1",
        "2",
        "3",
        "4",
        "5",
        "6",
        "7",
        "8",
        "9",
        "a",
        "b",
        "c",
        "d",
        "e",
        "f",
    ],  # Hex alphabet, ordered by numeric value
    "display": {
        "emoji_map": {  # For CLI rendering of feedback
            "TOO_LOW": "🔵",
            "EXACT": "🟢",
            "TOO_HIGH": "🔴",
        },
        "tile_colors": {  # For the web board
            "TOO_LOW": "rgba(37,99,235,0.5)",
            "EXACT": "rgba(22,163,74,0.5)",
            "TOO_HIGH": "rgba(220,38,38,0.5)",
        },
        "highlight_ms": 100,  # How long a pressed key stays highlighted
    },
}
