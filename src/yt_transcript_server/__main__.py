from yt_transcript_server.server import main

main()
