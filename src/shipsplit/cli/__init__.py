# Copyright (c) Syntropy Systems
"""shipsplit command line interface."""
