"""core

Pure contest rules: stat vectors, personality, gambit/appeal modifiers, scoring.
No UI imports here.
"""

API_VERSION = "core-v1-20261019"
