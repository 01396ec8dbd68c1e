"""Host adapters embedding the linker-script mode in concrete UIs."""
