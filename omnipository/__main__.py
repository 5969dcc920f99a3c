import argparse


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Run the Omnipository shell')

    parser.add_argument('-s', '--screen', nargs=2, type=int, default=(1280, 720),
                      help='Screen dimensions as width height (default: 1280 720)')

    parser.add_argument('--fps', type=int, default=60,
                      help='Target frames per second (default: 60)')

    parser.add_argument('--keep-selection', action='store_true',
                      help='Remember the last opened theme after going back to the platform')

    args = parser.parse_args(argv)
    return tuple(args.screen), args.fps, args.keep_selection


def main(argv=None):
    from omnipository.interface.main_window import MainWindow

    (sW, sH), fps, keep_selection = parse_args(argv)
    window = MainWindow(screen_size=(sH, sW), fps=fps, config={"clear_on_back": not keep_selection})
    window.main_loop()


if __name__ == '__main__':
    main()
