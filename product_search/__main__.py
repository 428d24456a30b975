from .query import main

raise SystemExit(main())
