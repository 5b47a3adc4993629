"""OS-facing helpers: filesystem, process exit hooks, executables."""
