from palette_engine.cli import main

main()
