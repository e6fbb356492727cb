import logging

from .integrator import simulate


def format_voltage(v):
    # six significant digits, like a C++ stream with default settings
    return "{:g}".format(float(v))


def main():
    """Run the default scenario and print the final membrane voltage."""
    logging.basicConfig(level=logging.WARNING,
                        format='%(asctime)s - %(levelname)s - %(message)s')
    traj = simulate()
    print(format_voltage(traj.final_voltage))


if __name__ == '__main__':
    main()
