"""Command line interface of lengthkit, see `lengthkit --help`."""
