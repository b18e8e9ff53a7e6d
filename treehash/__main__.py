from treehash.cli import main

raise SystemExit(main())
