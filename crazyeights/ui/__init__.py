"""wxPython front end for Crazy Eights."""
