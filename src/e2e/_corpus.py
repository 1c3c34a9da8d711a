# Shared seed text for the e2e tests.

FILLER = "lorem ipsum dolor sit amet consectetur adipiscing elit\n" * 4

TEXT = (
    "Enter Romeo and Juliet upon the balcony tonight.\n"
    + FILLER
    + "Romeo walks alone through the quiet garden.\n"
    + FILLER
    + "Juliet waits by the window.\n"
)
