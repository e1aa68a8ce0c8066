from enki.cli.main import main

raise SystemExit(main())
