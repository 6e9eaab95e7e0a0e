"""Data module - held-out example datasets."""

from .dataset import Example, ExampleDataset, ExampleRef, as_dataset

__all__ = [
    "Example",
    "ExampleDataset",
    "ExampleRef",
    "as_dataset",
]
