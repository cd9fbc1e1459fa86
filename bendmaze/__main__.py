from bendmaze.cli import main

raise SystemExit(main())
