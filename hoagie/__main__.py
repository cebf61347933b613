from hoagie.repl import main

raise SystemExit(main())
