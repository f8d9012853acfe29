from .pong_client import main

main()
