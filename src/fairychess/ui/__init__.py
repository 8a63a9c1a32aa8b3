"""Qt renderer: board scene, panels and main window."""
