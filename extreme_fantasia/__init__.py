"""Console setup phase for a two-player card game: mulligans, janken for turn order, first energy."""

__version__ = "0.1.0"