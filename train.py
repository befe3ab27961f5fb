#!/usr/bin/env python3
"""
Unigram Sentence Generator

Train a unigram model on a text corpus and print sentences drawn from it.

Usage:
    python train.py corpus.txt
    python train.py corpus.txt -n 5 --seed 42
    python train.py --brown news -n 3  # Train on the Brown corpus
"""

import sys

from nlptk.training import main


if __name__ == '__main__':
    sys.exit(main())
