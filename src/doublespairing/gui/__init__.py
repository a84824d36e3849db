"""Qt front end for Doubles Pairing."""
