"""Runtime services shared by every ld_mode layer."""
