"""Core pieces: text and encodings, selections, themes, configuration, home directory and a mock terminal."""