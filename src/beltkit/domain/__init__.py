"""Pure domain helpers: no I/O beyond reading the values handed in."""
