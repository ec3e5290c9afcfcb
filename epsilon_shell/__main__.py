from epsilon_shell.cli import main

raise SystemExit(main())
