"""An arcade game about keeping one button alive, with a pygame front end."""

__version__ = "0.1.0"