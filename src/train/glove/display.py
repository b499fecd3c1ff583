"""Display formatting for the GloVe training pipeline."""

__all__ = [
    "print_training_header",
    "print_completion_banner",
    "LINE_WIDTH"
]

LINE_WIDTH = 100


def print_training_header(start_time, num_documents, vocab_size, num_cells, config_lines):
    """
    Print training configuration header.

    Args:
        start_time (datetime): Start time of the process.
        num_documents (int): Number of documents in the corpus.
        vocab_size (int): Number of terms kept in the vocabulary.
        num_cells (int): Number of non-zero co-occurrence cells.
        config_lines (str): Formatted hyperparameters (see ``format_config``).
    """
    lines = [
        "GLOVE EMBEDDING TRAINING",
        "━" * LINE_WIDTH,
        f"Start Time: {start_time:%Y-%m-%d %H:%M:%S}",
        "",
        "Corpus",
        "═" * LINE_WIDTH,
        f"Documents:            {num_documents}",
        f"Vocabulary:           {vocab_size}",
        f"Co-occurrence cells:  {num_cells}",
        "",
        config_lines,
        "",
    ]
    print("\n".join(lines), flush=True)


def print_completion_banner(vocab_size, vector_size, n_iterations, final_loss, runtime):
    """
    Print completion banner with statistics.

    Args:
        vocab_size (int): Number of trained word vectors.
        vector_size (int): Dimensionality of the vectors.
        n_iterations (int): Iterations actually run.
        final_loss (float): Mean loss of the last iteration.
        runtime (timedelta): Total runtime.
    """
    lines = [
        "",
        "Training Complete",
        "═" * LINE_WIDTH,
        f"Word vectors:         {vocab_size}",
        f"Vector size:          {vector_size}",
        f"Iterations:           {n_iterations}",
        f"Final loss:           {final_loss:.6f}",
        f"Total runtime:        {runtime}",
        "━" * LINE_WIDTH,
        "",
    ]
    print("\n".join(lines), flush=True)
