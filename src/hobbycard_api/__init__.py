"""HobbyCard API - photo cards colored from their dominant color.

Fetches a random photo for a hobby, derives caption colors from the photo's
dominant color and serves the result as card view-models, together with the
hex/RGB/HSL color conversion helpers the cards are built from.
"""

__version__ = "0.1.0"
