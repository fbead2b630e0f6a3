# No fixtures: pytest inserts the directory of a rootdir conftest.py into sys.path,
# which lets ``adaptive_grid`` import from a source checkout.
