"""Run the IMU motion simulation in the terminal. See :mod:`imusim.cli`."""

from imusim.cli import main

if __name__ == "__main__":
    main()
