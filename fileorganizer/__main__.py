from fileorganizer.cli import main

raise SystemExit(main())
