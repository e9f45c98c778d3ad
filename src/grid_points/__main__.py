from grid_points.cli import main

raise SystemExit(main())
