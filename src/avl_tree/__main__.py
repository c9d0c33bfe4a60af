from avl_tree.cli.menu import main

raise SystemExit(main())
