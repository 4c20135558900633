"""A minesweeper board, with a TLS server that prints what clients send and a client."""