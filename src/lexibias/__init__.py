"""
Word embedding training and implicit-association bias measurement.

Shared building blocks live in ``lexibias.common``; GloVe training lives in
``train.glove`` and association queries in ``analyze``.
"""
