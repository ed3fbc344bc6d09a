import sys

from mp3_title_renamer.main import main

sys.exit(main())
