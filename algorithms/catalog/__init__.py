"""
algorithms/catalog/
-------------------
Static metadata, one module per topic, each exposing ALGORITHMS.
Imported lazily by algorithms.load_topic().
"""
