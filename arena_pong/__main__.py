from arena_pong.cli import main

main()
