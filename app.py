from ui.pokedex_window import main

if __name__ == "__main__":
    main()
