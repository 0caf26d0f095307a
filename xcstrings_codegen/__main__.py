from xcstrings_codegen.cli import main

raise SystemExit(main())
